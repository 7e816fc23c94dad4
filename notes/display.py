"""Formatting helpers shared by the list and detail views."""

from __future__ import annotations

from datetime import datetime

from .models import Note

UNTITLED_LABEL = "Untitled"
_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def display_title(note: Note) -> str:
    return note.title.strip() or UNTITLED_LABEL


def format_timestamp(value: datetime) -> str:
    """Render an instant in the local timezone."""
    return value.astimezone().strftime(_TIMESTAMP_FORMAT)


def last_modified(note: Note) -> str:
    return format_timestamp(note.updated_at)
