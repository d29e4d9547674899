import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from healthcare_pro.config import get_settings
from healthcare_pro.infrastructure.database import engine, initialize_database
from healthcare_pro.infrastructure.scheduler import (
    shutdown_reminder_jobs,
    start_daily_reminder_scheduler,
    start_medicine_reminder_job,
)
from healthcare_pro.interfaces.api.routes import register_routes

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the tables and run the reminder jobs for the lifetime of the app."""

    initialize_database()
    if get_settings().reminder_jobs_enabled:
        start_daily_reminder_scheduler()
        start_medicine_reminder_job()
    else:
        logger.info("Reminder jobs are disabled")
    try:
        yield
    finally:
        shutdown_reminder_jobs()
        engine.dispose()


def create_app() -> FastAPI:
    """Build and configure the FastAPI application."""

    app = FastAPI(title="HealthCare Pro Notifications", lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
