import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from learnsmart.application.use_cases.notifications import fan_out_queue
from learnsmart.config import get_settings
from learnsmart.infrastructure.database import engine, initialize_database
from learnsmart.infrastructure.notifications import notification_manager
from learnsmart.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the tables, start the fan-out worker and release resources on exit."""

    initialize_database()
    notification_manager.bind_loop(asyncio.get_running_loop())
    fan_out_queue.start()
    logger.info("LearnSmart API started")
    yield
    fan_out_queue.stop()
    notification_manager.bind_loop(None)
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    settings = get_settings()
    app = FastAPI(title="LearnSmart API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
