"""Effective display category for a note."""

from ..models import Note, NoteType


def effective_category(note: Note) -> NoteType:
    """
    Resolve the single display category of a note.

    An explicit note_type always wins. Legacy rows without one fall back to
    the is_public flag.
    """
    if note.note_type:
        return note.note_type
    return "public" if note.is_public else "private"
