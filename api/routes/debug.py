"""Diagnostic endpoints for manual inspection of the backend."""

from datetime import UTC, datetime

import structlog
from bson import ObjectId
from fastapi import APIRouter
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from ..database import get_db

# Initialize logger
logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/debug", tags=["debug"])

CANDIDATE_COLLECTIONS = ["notes", "Notes", "profiles", "users", "auth.users"]

SAMPLE_LIMIT = 5


def _encode(value):
    return jsonable_encoder(value, custom_encoder={ObjectId: str})


@router.get("/tables")
async def debug_tables():
    """Probe which of the candidate collections exist and sample one document each."""
    db = get_db()

    try:
        existing = set(await db.list_collection_names())
    except PyMongoError as e:
        logger.error("debug_tables_failed", error=str(e))
        return JSONResponse(status_code=500, content={"error": str(e)})

    table_tests = []
    for name in CANDIDATE_COLLECTIONS:
        exists = name in existing
        sample = None
        error = None if exists else f"Collection '{name}' does not exist"

        if exists:
            try:
                sample = await db[name].find_one()
            except PyMongoError as e:
                logger.warning("debug_table_probe_failed", collection=name, error=str(e))
                exists = False
                error = str(e)

        table_tests.append(
            {
                "table": name,
                "exists": exists,
                "error": error,
                "sampleData": _encode(sample),
                "dataCount": 1 if sample is not None else 0,
            }
        )

    logger.info("debug_tables_probed", existing=[t["table"] for t in table_tests if t["exists"]])

    return {
        "tableTests": table_tests,
        "timestamp": datetime.now(UTC).isoformat(),
        "database": db.name,
    }


@router.get("/test-notes")
async def debug_test_notes():
    """Fetch up to five raw note documents."""
    db = get_db()

    try:
        notes = await db.notes.find().limit(SAMPLE_LIMIT).to_list(length=SAMPLE_LIMIT)
    except PyMongoError as e:
        logger.error("debug_test_notes_failed", error=str(e))
        return JSONResponse(status_code=500, content={"success": False, "error": str(e)})

    logger.info("debug_test_notes_fetched", count=len(notes))

    return {
        "success": True,
        "count": len(notes),
        "notes": _encode(notes),
        "timestamp": datetime.now(UTC).isoformat(),
    }
