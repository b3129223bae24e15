"""Notes endpoints."""

from typing import Any

import structlog
from fastapi import APIRouter, HTTPException
from fastapi.encoders import jsonable_encoder

from ..database import get_db
from ..models import FilterEcho, NotesPage
from ..observability import get_tracer
from ..services import DisplayState, FetchError, FilterState, MongoNotesSource, NotesDisplay

# Initialize logger
logger = structlog.get_logger(__name__)

# Get tracer
tracer = get_tracer(__name__)

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("", response_model=NotesPage)
async def list_notes(
    search: str = "",
    public: bool = True,
    private: bool = True,
    articles: bool = True,
):
    """
    List rendered note cards.

    Fetches every note newest first, drops rows that fail validation, appends
    the demo notes, then applies the search text and category toggles.
    A backend failure returns 502 with the backend's message.
    """
    with tracer.start_as_current_span("list_notes") as span:
        filters = FilterState(public=public, private=private, articles=articles, search=search)

        span.set_attribute("filters.public", public)
        span.set_attribute("filters.private", private)
        span.set_attribute("filters.articles", articles)
        span.set_attribute("filters.search_length", len(search))

        source = MongoNotesSource(get_db())
        display = NotesDisplay(source.fetch_rows, filters=filters)
        state = await display.load()

        if state is DisplayState.FAILED:
            logger.warning("notes_list_failed", error=display.error)
            raise HTTPException(status_code=502, detail=display.error)

        view = display.view()
        cards = display.cards()

        span.set_attribute("notes.total", view.total)
        span.set_attribute("notes.filtered", view.filtered)

        logger.info("notes_listed", total=view.total, filtered=view.filtered)

        return NotesPage(
            state=state.value,
            total=view.total,
            filtered=view.filtered,
            empty_message=view.empty_message,
            filters=FilterEcho(**filters.model_dump()),
            cards=cards,
        )


@router.get("/rows")
async def list_note_rows() -> list[dict[str, Any]]:
    """
    Raw note rows from the backend, newest first.

    Used by clients that validate and filter locally.
    """
    with tracer.start_as_current_span("list_note_rows") as span:
        source = MongoNotesSource(get_db())

        try:
            rows = await source.fetch_rows()
        except FetchError as e:
            logger.warning("note_rows_failed", error=e.message)
            raise HTTPException(status_code=502, detail=e.message)

        span.set_attribute("notes.rows", len(rows))
        logger.info("note_rows_listed", count=len(rows))

        return jsonable_encoder(rows)
