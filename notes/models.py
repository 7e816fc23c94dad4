"""Pydantic models for notes and the editor draft."""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

TITLE_MAX_LENGTH = 100
CONTENT_MAX_LENGTH = 2000
DEFAULT_TITLE = "Untitled Note"


def utc_now() -> datetime:
    return datetime.now(UTC)


def new_note_id() -> str:
    return str(uuid4())


class Note(BaseModel):
    """A titled, timestamped text record.

    Stored with camelCase keys (``createdAt``/``updatedAt``) so the JSON
    written to local storage keeps the front-end's record shape.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_note_id, min_length=1)
    title: str = Field("", max_length=TITLE_MAX_LENGTH, description="Note title")
    content: str = Field(
        "", max_length=CONTENT_MAX_LENGTH, description="Note body"
    )
    created_at: datetime = Field(
        default_factory=utc_now,
        alias="createdAt",
        description="Creation instant, never changed",
    )
    updated_at: datetime = Field(
        default_factory=utc_now,
        alias="updatedAt",
        description="Last modification instant",
    )

    @field_validator("created_at", "updated_at", mode="after")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Stored timestamps without an offset are taken as UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @model_validator(mode="after")
    def _updated_not_before_created(self) -> Note:
        if self.updated_at < self.created_at:
            raise ValueError("updatedAt must not be earlier than createdAt")
        return self


class Draft(BaseModel):
    """Unsaved title/content pair shown in the editor form."""

    title: str = ""
    content: str = ""

    @classmethod
    def clipped(cls, title: str = "", content: str = "") -> Draft:
        """Build a draft, truncating fields to the form's input limits."""
        return cls(
            title=title[:TITLE_MAX_LENGTH],
            content=content[:CONTENT_MAX_LENGTH],
        )

    @classmethod
    def from_note(cls, note: Note) -> Draft:
        return cls(title=note.title, content=note.content)
