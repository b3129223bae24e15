"""Search and category filtering for the notes list."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel

from ..models import Note, NoteType
from .classification import effective_category

PUBLIC_CATEGORIES: frozenset[str] = frozenset(
    {"public", "shared-article", "under-review", "comment"}
)
PRIVATE_CATEGORIES: frozenset[str] = frozenset({"private"})
ARTICLE_CATEGORIES: frozenset[str] = frozenset({"article", "shared-article"})

NO_NOTES_MESSAGE = "No notes found."
NO_MATCHES_MESSAGE = "No notes match your current filters."

FILTER_TOGGLES = ("public", "private", "articles")


class FilterState(BaseModel):
    """Category toggles and free-text search for one display."""

    public: bool = True
    private: bool = True
    articles: bool = True
    search: str = ""


class FilterResult:
    """Filtered notes plus the counts needed to pick an empty-state message."""

    def __init__(self, notes: list[Note], total: int):
        self.notes = notes
        self.total = total

    @property
    def filtered(self) -> int:
        return len(self.notes)

    @property
    def empty_message(self) -> str | None:
        if self.notes:
            return None
        if self.total == 0:
            return NO_NOTES_MESSAGE
        return NO_MATCHES_MESSAGE


def matches_search(note: Note, search: str) -> bool:
    """Case-insensitive substring match on the note body. Empty search matches all."""
    if not search:
        return True
    return search.lower() in note.note_content.lower()


def matches_category(category: NoteType, filters: FilterState) -> bool:
    """True if any enabled toggle covers the category."""
    if filters.public and category in PUBLIC_CATEGORIES:
        return True
    if filters.private and category in PRIVATE_CATEGORIES:
        return True
    # shared-article is reachable from both the public and the articles toggle
    return filters.articles and category in ARTICLE_CATEGORIES


def include_note(note: Note, filters: FilterState) -> bool:
    """Search gate first, then category gate."""
    if not matches_search(note, filters.search):
        return False
    return matches_category(effective_category(note), filters)


def filter_notes(notes: Iterable[Note], filters: FilterState) -> FilterResult:
    """Apply the filter gates to every note, keeping order."""
    notes = list(notes)
    return FilterResult(
        notes=[note for note in notes if include_note(note, filters)],
        total=len(notes),
    )
