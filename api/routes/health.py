"""Liveness endpoints."""

import structlog
from fastapi import APIRouter

from ..database import Database
from ..observability import SERVICE_NAME_VALUE, SERVICE_VERSION_VALUE

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/")
async def root():
    logger.info("root_endpoint_accessed")
    return {"message": "Welcome to the Employee Notes API"}


@router.get("/health")
async def health():
    """Report liveness and whether the notes backend connection is open."""
    database = "connected" if Database.db is not None else "disconnected"
    logger.debug("health_check_requested", database=database)
    return {
        "status": "healthy",
        "service": SERVICE_NAME_VALUE,
        "version": SERVICE_VERSION_VALUE,
        "database": database,
    }
