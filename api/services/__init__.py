"""Notes feature services: validation, classification, filtering, display."""

from .classification import effective_category
from .display import DisplayState, FetchError, NotesDisplay
from .filters import FilterResult, FilterState, filter_notes, include_note
from .notes_source import MongoNotesSource
from .rendering import render_card
from .validation import coerce_note, validate_notes

__all__ = [
    "DisplayState",
    "FetchError",
    "FilterResult",
    "FilterState",
    "MongoNotesSource",
    "NotesDisplay",
    "coerce_note",
    "effective_category",
    "filter_notes",
    "include_note",
    "render_card",
    "validate_notes",
]
