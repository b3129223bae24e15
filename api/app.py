"""FastAPI application for the employee notes service."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

from .database import Database
from .observability import initialize_observability
from .routes import debug_router, health_router, notes_router, topics_router

# Initialize logger
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    logger.info("api_starting")

    initialize_observability()

    await Database.connect()
    logger.info("api_started")

    yield

    logger.info("api_shutting_down")
    await Database.disconnect()
    logger.info("api_shutdown_complete")


app = FastAPI(
    title="Employee Notes API",
    description="Validated, filtered and rendered employee notes from the managed backend",
    version="0.1.0",
    lifespan=lifespan,
)

# Instrument FastAPI with OpenTelemetry
FastAPIInstrumentor.instrument_app(app)

app.include_router(health_router)
app.include_router(notes_router)
app.include_router(topics_router)
app.include_router(debug_router)
