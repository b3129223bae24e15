"""Notes browser command handlers."""

import asyncio

import httpx

from api.models import NoteCard
from api.services import DisplayState, FetchError, NotesDisplay
from api.services.filters import FILTER_TOGGLES

from ..config import API_URL, REQUEST_TIMEOUT

FILTER_LABELS = {"public": "Public", "private": "Private Note", "articles": "Articles"}


async def fetch_note_rows(transport: httpx.AsyncBaseTransport | None = None) -> list[dict]:
    """Fetch raw note rows from the API, newest first.

    Args:
        transport: Optional custom transport (tests, proxies)

    Raises:
        FetchError: With the server's detail message when it provides one
    """
    try:
        async with httpx.AsyncClient(timeout=REQUEST_TIMEOUT, transport=transport) as client:
            response = await client.get(f"{API_URL}/notes/rows")
            response.raise_for_status()
            return response.json()
    except httpx.ConnectError as e:
        raise FetchError("Could not connect to API server") from e
    except httpx.HTTPStatusError as e:
        try:
            body = e.response.json()
        except ValueError:
            body = None
        detail = body.get("detail") if isinstance(body, dict) else None
        raise FetchError(detail or f"Request failed with status {e.response.status_code}") from e
    except httpx.HTTPError as e:
        raise FetchError(f"API request failed: {e}") from e


def new_display() -> NotesDisplay:
    """Create the long-lived display used by the REPL."""
    return NotesDisplay(fetch_note_rows)


def format_card(card: NoteCard) -> str:
    """Render a note card as plain text."""
    lines = [card.note_content]

    if card.quote:
        lines.append(f'  > "{card.quote.text}"')
        if card.quote.address:
            lines.append(f"  {card.quote.address}")
    if card.address:
        lines.append(f"  {card.address}")
    if card.link:
        lines.append(f"  {card.link.label} <{card.link.href}>")

    footer = f"  [{card.action}]"
    if card.stats:
        footer += f"  ♥ {card.stats.likes}  👁 {card.stats.views}"
    if card.label:
        footer += f"  {card.label.text}"
    lines.append(footer)

    return "\n".join(lines)


def show_filters(display: NotesDisplay):
    """Print the current toggles and search text."""
    filters = display.filters
    toggles = "  ".join(
        f"[{'x' if getattr(filters, name) else ' '}] {FILTER_LABELS[name]}"
        for name in FILTER_TOGGLES
    )
    search = f'"{filters.search}"' if filters.search else "(none)"
    print(f"\nShow... {toggles}")
    print(f"Search: {search}\n")


def show_notes(display: NotesDisplay):
    """Print the visible notes, or the matching empty-state message."""
    if display.state is DisplayState.FAILED:
        print("\nError loading notes")
        print(f"  {display.error}")
        print("Use /retry to try again.\n")
        return

    if display.state is not DisplayState.READY:
        print("\nNotes are not loaded yet. Use /notes to load them.\n")
        return

    view = display.view()
    if view.empty_message:
        print(f"\n{view.empty_message}\n")
        return

    print(f"\n=== Notes ({view.filtered} of {view.total}) ===\n")
    for card in display.cards():
        print(format_card(card))
        print()


def load_notes(display: NotesDisplay):
    """Fetch notes from scratch and print them."""
    print("\nLoading notes...")
    asyncio.run(display.load())
    show_notes(display)


def retry_notes(display: NotesDisplay):
    """Retry after a failed load."""
    if display.state is not DisplayState.FAILED:
        print("\nNothing to retry. Use /notes to reload.\n")
        return

    print("\nRetrying...")
    asyncio.run(display.retry())
    show_notes(display)


def search_notes(display: NotesDisplay, args: str = ""):
    """Set the search text (empty clears it) and reprint."""
    display.set_search(args.strip())
    show_notes(display)


def toggle_filter(display: NotesDisplay, args: str = ""):
    """Flip one category toggle and reprint."""
    name = args.strip().lower()
    if name not in FILTER_TOGGLES:
        print(f"Error: Unknown filter '{name}'. Use: {', '.join(FILTER_TOGGLES)}.\n")
        return

    display.toggle_filter(name)
    show_filters(display)
    show_notes(display)
