"""Illustrative notes merged into the list to showcase every card layout."""

from __future__ import annotations

from datetime import UTC, datetime

from ..models import Note

# Reserved id range for synthesized notes; never persisted
DEMO_NOTE_IDS = (1001, 1002, 1003, 1004)


def build_demo_notes(now: datetime | None = None) -> list[Note]:
    """Build the fixed demo set, stamped with the current time."""
    timestamp = (now or datetime.now(UTC)).isoformat()

    return [
        Note(
            id=1001,
            note_content="This quote really resonates with my daily work experience.",
            employee_id="00000000-0000-4000-8000-000000000001",
            is_public=True,
            is_approved_cbh=False,
            is_approved_emp=True,
            address="Truth and Reconciliation Guide, Page 15",
            quote="Reconciliation is not an Aboriginal problem; it is a Canadian opportunity.",
            note_type="under-review",
            view_count=5,
            like_count=2,
            created_at=timestamp,
            updated_at=timestamp,
        ),
        Note(
            id=1002,
            note_content="Great insights shared in our team discussion today.",
            employee_id="00000000-0000-4000-8000-000000000002",
            is_public=False,
            is_approved_cbh=False,
            is_approved_emp=False,
            address="Team Meeting Discussion Thread #45",
            note_type="comment",
            created_at=timestamp,
            updated_at=timestamp,
        ),
        Note(
            id=1003,
            note_content=(
                "This article provides excellent practical guidance for workplace implementation."
            ),
            employee_id="00000000-0000-4000-8000-000000000003",
            is_public=True,
            is_approved_cbh=True,
            is_approved_emp=True,
            address="Workplace Reconciliation Resources",
            note_type="article",
            view_count=28,
            like_count=6,
            article_link="https://www.rcaanc-cirnac.gc.ca/eng/1100100014597/1572547985018",
            created_at=timestamp,
            updated_at=timestamp,
        ),
        Note(
            id=1004,
            note_content="I found this topic very enlightening and it changed my perspective.",
            employee_id="00000000-0000-4000-8000-000000000004",
            is_public=True,
            is_approved_cbh=True,
            is_approved_emp=True,
            address="Learning Module 3: Understanding History",
            note_type="public",
            view_count=42,
            like_count=8,
            created_at=timestamp,
            updated_at=timestamp,
        ),
    ]
