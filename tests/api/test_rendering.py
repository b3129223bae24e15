"""Tests for note card layouts."""

import pytest

from api.models import NOTE_TYPES, Note
from api.services.rendering import render_card


@pytest.fixture
def make_note(employee_id):
    """Factory for notes of a given category."""

    def factory(note_type, **overrides):
        fields = {
            "id": 1,
            "note_content": "Note body",
            "employee_id": employee_id,
            "is_public": True,
            "is_approved_cbh": True,
            "is_approved_emp": True,
            "address": "Topic 1, Item 2",
            "note_type": note_type,
            "view_count": 15,
            "like_count": 3,
        }
        fields.update(overrides)
        return Note(**fields)

    return factory


class TestRenderCard:
    """Test the layout chosen for each category."""

    def test_public_note(self, make_note):
        """Test public notes show stats, the address and Edit & Sharing."""
        card = render_card(make_note("public"))

        assert card.category == "public"
        assert card.address == "Topic 1, Item 2"
        assert card.action == "Edit & Sharing"
        assert card.stats.views == 15
        assert card.stats.likes == 3
        assert card.label is None
        assert card.link is None

    def test_private_note(self, make_note):
        """Test private notes show the address but no stats."""
        card = render_card(make_note("private", is_public=False))

        assert card.address == "Topic 1, Item 2"
        assert card.action == "Edit & Sharing"
        assert card.stats is None

    def test_shared_article(self, make_note):
        """Test shared articles show stats and the regular address line."""
        card = render_card(
            make_note(
                "shared-article",
                address="Communication Resources",
                view_count=42,
                like_count=8,
                article_link="https://example.com/communication-guide",
            )
        )

        assert card.address == "Communication Resources"
        assert card.stats.views == 42
        assert card.stats.likes == 8
        assert card.link is None

    def test_under_review_with_quote(self, make_note):
        """Test under-review notes show the quote, a bare Edit and the label, never stats."""
        card = render_card(
            make_note(
                "under-review",
                address="Topic 1, Item 4",
                quote="Success is not final, failure is not fatal.",
                view_count=5,
                like_count=1,
            )
        )

        assert card.quote.text == "Success is not final, failure is not fatal."
        assert card.quote.address == "Topic 1, Item 4"
        assert card.address is None
        assert card.action == "Edit"
        assert card.label.text == "Under review"
        assert card.label.tone == "yellow"
        assert card.stats is None

    def test_comment_note(self, make_note):
        """Test comments show the address only."""
        card = render_card(make_note("comment", address="Discussion Thread #123"))

        assert card.address == "Discussion Thread #123"
        assert card.quote is None
        assert card.link is None
        assert card.stats is None
        assert card.action == "Edit & Sharing"

    def test_article_note(self, make_note):
        """Test articles link out with the address as label and show no stats."""
        card = render_card(
            make_note(
                "article",
                address="Resource Library",
                article_link="https://example.com/leadership-tips",
            )
        )

        assert card.link.href == "https://example.com/leadership-tips"
        assert card.link.label == "Resource Library"
        assert card.link.target == "_blank"
        assert card.link.rel == "noopener noreferrer"
        assert card.address is None
        assert card.stats is None
        assert card.action == "Edit & Sharing"

    def test_article_link_fallback_label(self, make_note):
        """Test an article without address is labeled View Article."""
        card = render_card(
            make_note("article", address=None, article_link="https://example.com/a")
        )

        assert card.link.label == "View Article"

    def test_article_without_link(self, make_note):
        """Test an article with no link shows neither link nor address."""
        card = render_card(make_note("article", article_link=""))

        assert card.link is None
        assert card.address is None

    def test_quote_replaces_address_for_any_category(self, make_note):
        """Test a quote block carries the address instead of the plain line."""
        for note_type in NOTE_TYPES:
            card = render_card(make_note(note_type, quote="Quoted text"))

            assert card.quote.text == "Quoted text"
            assert card.quote.address == "Topic 1, Item 2"
            assert card.address is None

    def test_missing_address(self, make_note):
        """Test notes without an address render no address line."""
        card = render_card(make_note("public", address=None))

        assert card.address is None

    def test_legacy_note_renders_by_fallback_category(self, make_note):
        """Test a note without note_type renders as public or private."""
        card = render_card(make_note(None, is_public=False))

        assert card.category == "private"
        assert card.stats is None

    def test_zero_counts(self, make_note):
        """Test stats show zeros when counters are zero."""
        card = render_card(make_note("public", view_count=0, like_count=0))

        assert card.stats.views == 0
        assert card.stats.likes == 0

    @pytest.mark.parametrize("note_type", NOTE_TYPES)
    def test_every_category_renders(self, make_note, note_type):
        """Test the renderer is total over categories."""
        card = render_card(make_note(note_type))

        assert card.id == 1
        assert card.note_content == "Note body"
