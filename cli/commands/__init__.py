"""CLI command handlers."""

from .auth import logout_user, set_token
from .notes import (
    load_notes,
    new_display,
    retry_notes,
    search_notes,
    show_filters,
    show_notes,
    toggle_filter,
)
from .topics import list_topics

__all__ = [
    # Notes commands
    "load_notes",
    "new_display",
    "retry_notes",
    "search_notes",
    "show_filters",
    "show_notes",
    "toggle_filter",
    # Topics commands
    "list_topics",
    # Token commands
    "logout_user",
    "set_token",
]
