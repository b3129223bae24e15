"""API route handlers organized by domain."""

from .debug import router as debug_router
from .health import router as health_router
from .notes import router as notes_router
from .topics import router as topics_router

__all__ = ["debug_router", "health_router", "notes_router", "topics_router"]
