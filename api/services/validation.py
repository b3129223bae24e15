"""Normalization and validation of raw note rows from the backend."""

from __future__ import annotations

import os
import random
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any

import structlog
from pydantic import ValidationError

from ..models import Note
from ..models.notes import whole_number
from ..observability import get_app_metrics

logger = structlog.get_logger(__name__)

RANDOM_STAT_DEFAULTS = os.getenv("NOTES_RANDOM_STAT_DEFAULTS", "false").lower() == "true"

# Upper bounds (exclusive) for placeholder counters
RANDOM_VIEW_CEILING = 50
RANDOM_LIKE_CEILING = 10


def _timestamp_text(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def apply_defaults(
    row: Mapping[str, Any],
    index: int,
    *,
    random_stats: bool = False,
    rng: random.Random | None = None,
) -> dict[str, Any]:
    """
    Fill in optional and legacy columns before structural validation.

    Args:
        row: Raw backend row
        index: 0-based position of the row in the fetched batch
        random_stats: Use placeholder random counters instead of 0 for missing counts
        rng: Random source for placeholder counters

    Returns:
        A new dict with the canonical note fields
    """
    topic_id = whole_number(row.get("topic_id")) or None
    is_public = row.get("is_public")

    view_count = row.get("view_count")
    like_count = row.get("like_count")
    if random_stats:
        rng = rng or random.Random()
        if view_count is None:
            view_count = rng.randrange(RANDOM_VIEW_CEILING)
        if like_count is None:
            like_count = rng.randrange(RANDOM_LIKE_CEILING)

    return {
        "id": row.get("id"),
        "textrange": row.get("textrange") or None,
        "note_content": row.get("note_content"),
        "topic_id": topic_id,
        "employee_id": row.get("employee_id"),
        "is_public": is_public,
        "is_approved_cbh": row.get("is_approved_cbh"),
        "is_approved_emp": row.get("is_approved_emp"),
        "address": row.get("address") or f"Topic {topic_id or 'Unknown'}, Item {index + 1}",
        "quote": row.get("quote") or None,
        "note_type": row.get("note_type") or ("public" if is_public else "private"),
        "view_count": 0 if view_count is None else view_count,
        "like_count": 0 if like_count is None else like_count,
        "article_link": row.get("article_link") or None,
        "created_at": _timestamp_text(row.get("created_at")),
        "updated_at": _timestamp_text(row.get("updated_at")),
    }


def coerce_note(
    row: Mapping[str, Any],
    index: int,
    *,
    random_stats: bool = False,
    rng: random.Random | None = None,
) -> Note:
    """Default and validate one row. Raises pydantic.ValidationError on rejection."""
    return Note.model_validate(apply_defaults(row, index, random_stats=random_stats, rng=rng))


def validate_notes(
    rows: Iterable[Any],
    *,
    random_stats: bool | None = None,
    rng: random.Random | None = None,
) -> list[Note]:
    """
    Validate a fetched batch, dropping rows that fail.

    Each row is checked independently so one bad row never rejects the batch.
    Output order follows input order.
    """
    if random_stats is None:
        random_stats = RANDOM_STAT_DEFAULTS

    notes: list[Note] = []
    rejected = 0

    for index, row in enumerate(rows):
        if not isinstance(row, Mapping):
            logger.warning("note_row_not_mapping", index=index, row_type=type(row).__name__)
            rejected += 1
            continue

        try:
            notes.append(coerce_note(row, index, random_stats=random_stats, rng=rng))
        except ValidationError as e:
            logger.warning(
                "note_validation_failed",
                index=index,
                note_id=row.get("id"),
                errors=e.errors(include_url=False, include_input=False),
            )
            rejected += 1

    metrics = get_app_metrics()
    metrics.notes_fetched.add(len(notes))
    if rejected:
        metrics.notes_rejected.add(rejected)

    logger.info("notes_validated", accepted=len(notes), rejected=rejected)
    return notes
