"""Pydantic models for API requests and responses."""

from .notes import (
    NOTE_TYPES,
    ArticleLink,
    FilterEcho,
    Note,
    NoteCard,
    NotesPage,
    NoteStats,
    NoteType,
    QuoteBlock,
    StatusLabel,
)
from .topics import Topic, TopicMenuResponse

__all__ = [
    "NOTE_TYPES",
    "ArticleLink",
    "FilterEcho",
    # Notes models
    "Note",
    "NoteCard",
    "NoteStats",
    "NoteType",
    "NotesPage",
    "QuoteBlock",
    "StatusLabel",
    # Topics models
    "Topic",
    "TopicMenuResponse",
]
