"""
FastAPI application factory for the date picker backend.

Creates and configures the FastAPI app, the picker session store and
the routes.

Run with:
    uvicorn datepicker.api.app:app --reload
"""

import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from datepicker.api.routes import configure_routes, router
from datepicker.core.calendar_state import DEFAULT_FIRST_WEEKDAY
from datepicker.core.session import PickerSessionStore

# Load environment variables from .env
load_dotenv()

# Logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def _first_weekday(value: str | None) -> int:
    if value is None or not value.strip():
        return DEFAULT_FIRST_WEEKDAY
    try:
        weekday = int(value)
    except ValueError:
        logger.warning("Invalid DATEPICKER_FIRST_WEEKDAY %r, using default", value)
        return DEFAULT_FIRST_WEEKDAY
    if not 0 <= weekday <= 6:
        logger.warning("DATEPICKER_FIRST_WEEKDAY %d out of range (0-6), using default", weekday)
        return DEFAULT_FIRST_WEEKDAY
    return weekday


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    application = FastAPI(
        title="Date Picker",
        description="Single-date picker backend with free-text date entry",
        version="0.1.0",
    )

    # CORS - allow all origins in development
    allowed_origins = os.getenv("CORS_ALLOWED_ORIGINS", "*").split(",")
    application.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Initialize session store
    session_timeout = int(os.getenv("SESSION_TIMEOUT_SECONDS", "1800"))
    first_weekday = _first_weekday(os.getenv("DATEPICKER_FIRST_WEEKDAY"))
    session_store = PickerSessionStore(
        timeout_seconds=session_timeout,
        first_weekday=first_weekday,
    )

    # Configure routes with dependencies
    configure_routes(session_store)
    application.include_router(router, prefix="/api")

    @application.on_event("startup")
    async def on_startup():
        logger.info("Date picker backend starting up")
        logger.info("Session timeout: %d seconds", session_timeout)
        logger.info("Grid weeks start on weekday %d", first_weekday)

    return application


# Create the app instance (used by uvicorn)
app = create_app()
