"""Create the main admin account without going through email verification."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from learnsmart.application.use_cases.users import create_account
from learnsmart.config import get_settings
from learnsmart.domain.errors import AlreadyExistsError, ValidationError
from learnsmart.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Create the main admin account of the LearnSmart API.",
    )
    parser.add_argument(
        "--email",
        default=None,
        help="Account email (default: MAIN_ADMIN_EMAIL from the settings)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Account password. Prompted for when omitted.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    settings = get_settings()
    email = args.email or settings.main_admin_email
    if email.strip().lower() != settings.main_admin_email.strip().lower():
        print(
            f"Warning: {email} is not MAIN_ADMIN_EMAIL ({settings.main_admin_email}); "
            "the account will not have admin rights."
        )

    password = args.password or getpass("Password: ")
    if not password:
        raise SystemExit("No password provided.")

    initialize_database()

    session = SessionLocal()
    try:
        user = create_account(session, email=email, password=password)
    except (AlreadyExistsError, ValidationError) as exc:
        raise SystemExit(f"Could not create the account: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Database error while saving the account: {exc}") from exc
    else:
        print(f"Account created:\n  ID: {user.id}\n  Email: {user.email}")
    finally:
        session.close()


if __name__ == "__main__":
    main()
