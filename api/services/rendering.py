"""Card layout for a single note."""

from ..models import ArticleLink, Note, NoteCard, NoteStats, QuoteBlock, StatusLabel
from .classification import effective_category

STATS_CATEGORIES = frozenset({"public", "shared-article"})

EDIT_ACTION = "Edit"
EDIT_AND_SHARE_ACTION = "Edit & Sharing"
UNDER_REVIEW_LABEL = "Under review"
ARTICLE_FALLBACK_LABEL = "View Article"


def render_card(note: Note) -> NoteCard:
    """
    Map a note to its card layout.

    A quote block, when present, carries the address and replaces the plain
    address line for every category. Stats show only for public notes and
    shared articles; plain articles do not show them.
    """
    category = effective_category(note)
    has_quote = bool(note.quote)

    quote = None
    if has_quote:
        quote = QuoteBlock(text=note.quote, address=note.address or None)

    link = None
    if category == "article" and note.article_link:
        link = ArticleLink(href=note.article_link, label=note.address or ARTICLE_FALLBACK_LABEL)

    address = None
    if not has_quote and category != "article" and note.address:
        address = note.address

    stats = None
    if category in STATS_CATEGORIES:
        stats = NoteStats(likes=note.like_count or 0, views=note.view_count or 0)

    label = None
    action = EDIT_AND_SHARE_ACTION
    if category == "under-review":
        label = StatusLabel(text=UNDER_REVIEW_LABEL, tone="yellow")
        action = EDIT_ACTION

    return NoteCard(
        id=note.id,
        note_content=note.note_content,
        category=category,
        quote=quote,
        address=address,
        link=link,
        action=action,
        stats=stats,
        label=label,
    )
