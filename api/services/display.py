"""Notes display state machine: fetch, validate, merge demo notes, filter."""

from __future__ import annotations

import os
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any

import structlog
from opentelemetry import trace

from ..models import Note, NoteCard
from ..observability import get_app_metrics
from .demo_notes import build_demo_notes
from .filters import FILTER_TOGGLES, FilterResult, FilterState, filter_notes
from .rendering import render_card
from .validation import validate_notes

logger = structlog.get_logger(__name__)
tracer = trace.get_tracer(__name__)

INCLUDE_DEMO_NOTES = os.getenv("NOTES_INCLUDE_DEMO", "true").lower() == "true"

DEFAULT_FETCH_ERROR = "Failed to fetch notes"

RowFetcher = Callable[[], Awaitable[list[dict[str, Any]]]]


class FetchError(Exception):
    """Transport failure or backend-reported error for a whole fetch."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DisplayState(str, Enum):
    """Lifecycle of a notes display."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


class NotesDisplay:
    """
    Owns the notes list and filter state for one display.

    Loading never overlaps in effect: if a second load starts before the
    first resolves, the first result is discarded when it arrives.
    """

    def __init__(
        self,
        fetch_rows: RowFetcher,
        *,
        include_demo_notes: bool | None = None,
        random_stat_defaults: bool | None = None,
        filters: FilterState | None = None,
    ):
        """Initialize the display.

        Args:
            fetch_rows: Coroutine function returning raw rows, newest first
            include_demo_notes: Append the demo set on every successful load
            random_stat_defaults: Placeholder random counters for rows missing them
            filters: Initial filter state (all toggles on, empty search by default)
        """
        self.fetch_rows = fetch_rows
        self.include_demo_notes = (
            INCLUDE_DEMO_NOTES if include_demo_notes is None else include_demo_notes
        )
        self.random_stat_defaults = random_stat_defaults
        self.filters = filters or FilterState()

        self.state = DisplayState.IDLE
        self.notes: list[Note] = []
        self.error: str | None = None
        self._generation = 0

    async def load(self) -> DisplayState:
        """Fetch from scratch and move to READY or FAILED."""
        self._generation += 1
        generation = self._generation

        self.state = DisplayState.LOADING
        self.error = None

        with tracer.start_as_current_span("notes_display.load") as span:
            logger.info("notes_fetch_started", generation=generation)

            try:
                rows = await self.fetch_rows()
            except Exception as e:
                if generation != self._generation:
                    logger.info("notes_fetch_superseded", generation=generation)
                    return self.state

                message = e.message if isinstance(e, FetchError) else str(e)
                message = message or DEFAULT_FETCH_ERROR
                span.set_attribute("error", True)
                span.set_attribute("error.type", type(e).__name__)
                get_app_metrics().notes_fetch_failures.add(1)
                logger.error("notes_fetch_failed", error=message, error_type=type(e).__name__)

                self.notes = []
                self.error = message
                self.state = DisplayState.FAILED
                return self.state

            if generation != self._generation:
                logger.info("notes_fetch_superseded", generation=generation)
                return self.state

            notes = validate_notes(rows or [], random_stats=self.random_stat_defaults)
            if self.include_demo_notes:
                notes.extend(build_demo_notes())

            span.set_attribute("notes.rows", len(rows or []))
            span.set_attribute("notes.count", len(notes))

            self.notes = notes
            self.state = DisplayState.READY
            logger.info("notes_fetch_completed", rows=len(rows or []), notes=len(notes))
            return self.state

    async def retry(self) -> DisplayState:
        """Re-issue the fetch after a failure. No-op in any other state."""
        if self.state is not DisplayState.FAILED:
            logger.warning("notes_retry_ignored", state=self.state.value)
            return self.state

        logger.info("notes_retry_requested")
        return await self.load()

    def set_search(self, search: str) -> None:
        self.filters = self.filters.model_copy(update={"search": search})

    def toggle_filter(self, name: str) -> bool:
        """Flip one category toggle and return its new value."""
        if name not in FILTER_TOGGLES:
            raise ValueError(f"Unknown filter '{name}'. Use: {', '.join(FILTER_TOGGLES)}")
        value = not getattr(self.filters, name)
        self.filters = self.filters.model_copy(update={name: value})
        return value

    def set_filters(self, filters: FilterState) -> None:
        self.filters = filters

    def view(self) -> FilterResult:
        """Notes currently visible under the filter state."""
        return filter_notes(self.notes, self.filters)

    def cards(self) -> list[NoteCard]:
        return [render_card(note) for note in self.view().notes]
