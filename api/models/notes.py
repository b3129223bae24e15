"""Notes-related Pydantic models."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import (
    AnyUrl,
    BaseModel,
    BeforeValidator,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    TypeAdapter,
    ValidationError,
    field_validator,
)

NoteType = Literal["public", "private", "shared-article", "under-review", "comment", "article"]

NOTE_TYPES: tuple[str, ...] = (
    "public",
    "private",
    "shared-article",
    "under-review",
    "comment",
    "article",
)

UUID_PATTERN = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"

_url_adapter = TypeAdapter(AnyUrl)


def whole_number(value: Any) -> Any:
    """Turn an integral float (how BSON doubles arrive) into an int; leave anything else alone."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


# Strict int that also takes 5.0 but not 2.5 or "5"
WholeInt = Annotated[StrictInt, BeforeValidator(whole_number)]


class Note(BaseModel):
    """Canonical employee note as displayed by the notes feature."""

    id: WholeInt
    note_content: StrictStr = Field(..., min_length=1)
    employee_id: StrictStr = Field(..., pattern=UUID_PATTERN)
    is_public: StrictBool
    is_approved_cbh: StrictBool
    is_approved_emp: StrictBool
    address: StrictStr | None = None
    quote: StrictStr | None = None
    note_type: NoteType | None = None
    view_count: WholeInt = Field(default=0, ge=0)
    like_count: WholeInt = Field(default=0, ge=0)
    article_link: StrictStr | None = None
    created_at: StrictStr | None = None
    updated_at: StrictStr | None = None
    topic_id: WholeInt | None = None
    textrange: list[WholeInt] | None = None

    @field_validator("article_link")
    @classmethod
    def check_article_link(cls, value: str | None) -> str | None:
        """Allow None or the empty string, otherwise require an absolute URL."""
        if not value:
            return value
        try:
            _url_adapter.validate_python(value)
        except ValidationError:
            raise ValueError("article_link must be a valid URL") from None
        return value


class QuoteBlock(BaseModel):
    """Quote text with the resource address rendered beneath it."""

    text: str
    address: str | None = None


class ArticleLink(BaseModel):
    """External article link opened in a new browsing context."""

    href: str
    label: str
    target: str = "_blank"
    rel: str = "noopener noreferrer"


class NoteStats(BaseModel):
    """Like and view counters."""

    likes: int = 0
    views: int = 0


class StatusLabel(BaseModel):
    """Colored status label shown in the action row."""

    text: str
    tone: str


class NoteCard(BaseModel):
    """Layout of a single rendered note card."""

    id: int
    note_content: str
    category: NoteType
    quote: QuoteBlock | None = None
    address: str | None = None
    link: ArticleLink | None = None
    action: Literal["Edit", "Edit & Sharing"]
    stats: NoteStats | None = None
    label: StatusLabel | None = None


class FilterEcho(BaseModel):
    """Filter state applied to a notes page."""

    search: str
    public: bool
    private: bool
    articles: bool


class NotesPage(BaseModel):
    """Response model for the rendered notes list."""

    state: Literal["idle", "loading", "ready", "failed"]
    total: int
    filtered: int
    empty_message: str | None = None
    filters: FilterEcho
    cards: list[NoteCard] = Field(default_factory=list)
