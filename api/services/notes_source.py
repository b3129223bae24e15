"""Backend read access for note rows."""

from __future__ import annotations

from time import time
from typing import Any

import structlog
from motor.motor_asyncio import AsyncIOMotorDatabase
from opentelemetry import trace
from pymongo.errors import PyMongoError

from ..observability import get_app_metrics
from .display import FetchError

logger = structlog.get_logger(__name__)
tracer = trace.get_tracer(__name__)

NOTES_COLLECTION = "notes"


class MongoNotesSource:
    """Reads note rows from the notes collection, newest first."""

    def __init__(self, db: AsyncIOMotorDatabase, collection: str = NOTES_COLLECTION):
        self.db = db
        self.collection = collection

    @tracer.start_as_current_span("notes_source.fetch_rows")
    async def fetch_rows(self, limit: int | None = None) -> list[dict[str, Any]]:
        """Fetch all rows ordered by created_at descending.

        Args:
            limit: Optional cap on the number of rows

        Returns:
            Raw rows without the Mongo _id

        Raises:
            FetchError: If the backend reports an error
        """
        span = trace.get_current_span()
        span.set_attribute("db.system", "mongodb")
        span.set_attribute("db.collection", self.collection)

        start_time = time()
        try:
            cursor = self.db[self.collection].find({}, {"_id": 0}).sort("created_at", -1)
            if limit:
                cursor = cursor.limit(limit)
            rows = await cursor.to_list(length=limit)
        except PyMongoError as e:
            logger.error("notes_rows_fetch_failed", collection=self.collection, error=str(e))
            span.set_attribute("error", True)
            raise FetchError(str(e)) from e

        duration = (time() - start_time) * 1000
        get_app_metrics().db_query_duration.record(duration, {"collection": self.collection})

        span.set_attribute("db.rows", len(rows))
        logger.debug("notes_rows_fetched", count=len(rows), query_ms=round(duration, 2))
        return rows
