"""Pydantic models for notes, update requests and AI actions."""

from __future__ import annotations

import time
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


def now_ms() -> int:
    """Current wall-clock time in milliseconds since the epoch."""
    return int(time.time() * 1000)


class AIAction(str, Enum):
    """Content transformations offered by the AI panel."""

    SUMMARIZE = "SUMMARIZE"
    EXPAND = "EXPAND"
    REWRITE_SCIFI = "REWRITE_SCIFI"
    FIX_GRAMMAR = "FIX_GRAMMAR"


class Note(BaseModel):
    """A single note.

    Instances are immutable; the store replaces a note with an updated copy.
    Field names serialize in camelCase (``createdAt``, ``isFavorite``...).
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str = Field(default_factory=lambda: str(uuid4()))
    title: str = ""
    content: str = ""
    created_at: int = Field(default_factory=now_ms, description="Epoch milliseconds")
    updated_at: int = Field(default_factory=now_ms, description="Epoch milliseconds")
    tags: tuple[str, ...] = ()
    is_favorite: bool = False
    ai_summary: str | None = None


class NoteUpdate(BaseModel):
    """Field-level update request for an existing note.

    Only the fields declared here can change. ``id``, ``created_at`` and
    ``updated_at`` are rejected as unknown fields.
    """

    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)

    title: str | None = None
    content: str | None = None
    is_favorite: bool | None = None
    tags: tuple[str, ...] | None = None

    @property
    def changes(self) -> dict[str, object]:
        """Fields explicitly set on this request, by attribute name."""
        return self.model_dump(exclude_unset=True, exclude_none=True)

    @property
    def touches_text(self) -> bool:
        """Whether the update names the title or the content."""
        changes = self.changes
        return "title" in changes or "content" in changes


NOTES_ADAPTER: TypeAdapter[list[Note]] = TypeAdapter(list[Note])
