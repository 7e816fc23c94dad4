"""JSON file-backed key-value storage and the notes repository on top of it."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from .models import Note

logger = logging.getLogger(__name__)

STORAGE_KEY = "notes_simple_app_data"

_NOTES_ADAPTER = TypeAdapter(list[Note])


class LocalStorage:
    """A ``localStorage``-like string map persisted to a single JSON file."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Unreadable storage file %s: %s", self._path, exc)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Storage file %s is not a JSON object", self._path)
            return {}
        return {k: v for k, v in raw.items() if isinstance(v, str)}

    def _write_all(self, items: dict[str, str]) -> None:
        """Write the whole map atomically (temp file, then rename)."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(items, fh, indent=2)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get_item(self, key: str) -> str | None:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        self._write_all(items)

    def remove_item(self, key: str) -> None:
        items = self._read_all()
        if items.pop(key, None) is not None:
            self._write_all(items)


class NotesRepository:
    """Loads and saves the ordered note collection under one storage key."""

    def __init__(self, storage: LocalStorage, key: str = STORAGE_KEY) -> None:
        self._storage = storage
        self._key = key

    def load(self) -> list[Note]:
        """Return the stored notes, or an empty list if absent or corrupt."""
        value = self._storage.get_item(self._key)
        if value is None:
            logger.info("No stored notes under '%s', starting empty", self._key)
            return []
        try:
            notes = _NOTES_ADAPTER.validate_json(value)
        except ValidationError as exc:
            logger.warning(
                "Failed to load notes under '%s': %s (starting empty)",
                self._key,
                exc.error_count(),
            )
            return []
        if len({n.id for n in notes}) != len(notes):
            logger.warning(
                "Duplicate note ids under '%s' (starting empty)", self._key
            )
            return []
        logger.info("Loaded %d notes from %s", len(notes), self._storage.path)
        return notes

    def save(self, notes: Sequence[Note]) -> None:
        """Overwrite the stored collection with ``notes``."""
        payload = _NOTES_ADAPTER.dump_json(list(notes), by_alias=True)
        self._storage.set_item(self._key, payload.decode("utf-8"))
        logger.debug("Saved %d notes under '%s'", len(notes), self._key)
