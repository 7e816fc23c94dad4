"""Seed the local notes storage with sample notes for demos.

Usage:
    python scripts/seed_notes.py [--storage-path notes_data.json] [--reset]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from notes.config import settings  # noqa: E402
from notes.storage import LocalStorage, NotesRepository  # noqa: E402
from notes.store import NotesStore  # noqa: E402

# Each entry: (title, content). Created in order, so the last one lists first.
SAMPLE_NOTES: list[tuple[str, str]] = [
    ("Groceries", "Milk\nEggs\nBread\nCoffee beans"),
    (
        "Meeting Notes",
        "Agreed to ship the notes app this week.\n"
        "Follow-up: collect feedback on the sidebar layout.",
    ),
    ("Reading List", "The Pragmatic Programmer\nDesigning Data-Intensive Applications"),
    ("", "A quick thought without a title."),
]


def seed(store: NotesStore, reset: bool = False) -> int:
    """Create the sample notes in ``store``. Returns the number created."""
    if reset:
        for note in store.list():
            store.delete(note.id)
    for title, content in SAMPLE_NOTES:
        store.create(title, content)
    return len(SAMPLE_NOTES)


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed sample notes")
    parser.add_argument(
        "--storage-path",
        type=Path,
        default=settings.notes_storage_path,
        help=f"Local storage file (default: {settings.notes_storage_path})",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Delete existing notes before seeding",
    )
    args = parser.parse_args()

    store = NotesStore(NotesRepository(LocalStorage(args.storage_path)))
    created = seed(store, reset=args.reset)

    print(f"\n  Seeded {created} notes into {args.storage_path}")
    for note in store.list():
        print(f"    - {note.title}")
    print("\n  Start the app with: streamlit run ui/app.py\n")


if __name__ == "__main__":
    main()
