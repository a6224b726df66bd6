"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./learnsmart.db",
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for signing JWT tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=60,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    main_admin_email: str = Field(
        default="admin@learnsmart.local",
        description="Email address of the owner account allowed to manage sub-admins",
        min_length=3,
    )
    sendgrid_api_key: str | None = Field(
        default=None,
        description="SendGrid API key used for sending transactional emails via the REST API",
    )
    sendgrid_sender: str | None = Field(
        default=None,
        description="Email address that will appear as the sender of transactional messages",
        min_length=3,
    )
    sendgrid_sender_name: str = Field(
        default="LearnSmart",
        description="Display name attached to the sender address",
    )
    mail_timeout_seconds: float = Field(
        default=10.0,
        description="Upper bound for a single mail transport call",
        gt=0,
    )
    otp_ttl_seconds: int = Field(
        default=300,
        description="Lifetime of a one-time passcode",
        gt=0,
    )
    otp_retention_seconds: int = Field(
        default=3600,
        description="How long an expired passcode is kept so it can be reported as expired",
        ge=0,
    )
    fanout_concurrency: int = Field(
        default=4,
        description="Maximum number of recipients processed in parallel by a fan-out job",
        gt=0,
    )
    fanout_max_attempts: int = Field(
        default=3,
        description="Attempts per recipient before a fan-out item is given up",
        gt=0,
    )
    azure_storage_connection_string: str | None = Field(
        default=None,
        description="Connection string of the Azure storage account holding note PDFs",
    )
    azure_storage_container_name: str = Field(
        default="notes-pdfs",
        description="Blob container where note PDFs are stored",
    )
    openai_api_key: str | None = Field(
        default=None,
        description="Server-side OpenAI key used by the study assistant",
    )
    openai_base_url: str | None = None
    openai_model: str = "gpt-3.5-turbo"
    openai_temperature: float = 0.7
    openai_max_tokens: int = Field(default=500, gt=0)
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    app_timezone: str = "UTC"

    @model_validator(mode="after")
    def _validate_sendgrid_pair(self) -> "Settings":
        if bool(self.sendgrid_api_key) ^ bool(self.sendgrid_sender):
            raise ValueError(
                "SENDGRID_API_KEY and SENDGRID_SENDER must both be provided to enable email"
            )
        if self.sendgrid_sender and "@" not in self.sendgrid_sender:
            raise ValueError("SENDGRID_SENDER must be a valid email address")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
