"""Tests for the sample-data seeding script."""

from __future__ import annotations

from pathlib import Path

from notes.models import DEFAULT_TITLE
from notes.storage import LocalStorage, NotesRepository
from notes.store import NotesStore
from scripts.seed_notes import SAMPLE_NOTES, seed


def _store(path: Path) -> NotesStore:
    return NotesStore(NotesRepository(LocalStorage(path)))


def test_seed_creates_samples_newest_first(tmp_path: Path) -> None:
    store = _store(tmp_path / "notes.json")
    assert seed(store) == len(SAMPLE_NOTES)
    titles = [n.title for n in store.list()]
    assert titles[0] == DEFAULT_TITLE
    assert titles[-1] == "Groceries"


def test_seed_reset_replaces_existing(tmp_path: Path) -> None:
    path = tmp_path / "notes.json"
    store = _store(path)
    store.create("Old", "old")
    seed(store, reset=True)
    reloaded = _store(path)
    assert reloaded.count == len(SAMPLE_NOTES)
    assert "Old" not in [n.title for n in reloaded.list()]
