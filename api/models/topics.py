"""Topic menu Pydantic models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Topic(BaseModel):
    """A course topic entry from the topics endpoint."""

    model_config = ConfigDict(extra="allow")

    id: Any = None
    title: str | None = None


class TopicMenuResponse(BaseModel):
    """Response model for the topics menu."""

    topics: list[Topic] = Field(default_factory=list)
    filtered: bool = False
