"""Notes store: the collection, selection, editor and deletion workflow.

One ``NotesStore`` is owned by each UI session. Every mutation of the
collection is written back through the repository before returning.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timedelta
from enum import Enum

from .models import DEFAULT_TITLE, Draft, Note, new_note_id, utc_now
from .storage import NotesRepository

logger = logging.getLogger(__name__)


class EditorMode(str, Enum):
    CLOSED = "closed"
    CREATE = "open-create"
    EDIT = "open-edit"


class NotesStore:
    """In-memory notes collection mirrored to a repository."""

    def __init__(
        self,
        repository: NotesRepository,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_note_id,
    ) -> None:
        self._repository = repository
        self._clock = clock
        self._id_factory = id_factory
        self._notes: list[Note] = repository.load()
        self.selected_id: str | None = None
        self.editor_mode = EditorMode.CLOSED
        self.draft = Draft()
        self.pending_delete_id: str | None = None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self) -> list[Note]:
        """Return the notes in display order (newest created first)."""
        return list(self._notes)

    def get(self, note_id: str | None) -> Note | None:
        if note_id is None:
            return None
        return next((n for n in self._notes if n.id == note_id), None)

    def _index(self, note_id: str) -> int | None:
        for i, note in enumerate(self._notes):
            if note.id == note_id:
                return i
        return None

    @property
    def selected_note(self) -> Note | None:
        return self.get(self.selected_id)

    @property
    def editor_open(self) -> bool:
        return self.editor_mode is not EditorMode.CLOSED

    @property
    def count(self) -> int:
        return len(self._notes)

    # ------------------------------------------------------------------
    # Collection mutations
    # ------------------------------------------------------------------

    def _persist(self) -> None:
        self._repository.save(self._notes)

    def _fresh_id(self) -> str:
        note_id = self._id_factory()
        while self._index(note_id) is not None:
            logger.warning("Generated duplicate note id %s, retrying", note_id)
            note_id = self._id_factory()
        return note_id

    def create(self, title: str, content: str) -> Note:
        """Prepend a new note and persist. Blank titles become the default."""
        now = self._clock()
        note = Note(
            id=self._fresh_id(),
            title=title if title.strip() else DEFAULT_TITLE,
            content=content,
            created_at=now,
            updated_at=now,
        )
        self._notes.insert(0, note)
        self._persist()
        logger.info("Created note %s — '%s'", note.id, note.title)
        return note

    def update(self, note_id: str, title: str, content: str) -> Note | None:
        """Replace a note's title/content in place and refresh ``updated_at``.

        Returns ``None`` (and changes nothing) if the id is unknown.
        """
        index = self._index(note_id)
        if index is None:
            logger.debug("Ignoring update of unknown note %s", note_id)
            return None
        current = self._notes[index]
        now = self._clock()
        if now <= current.updated_at:
            now = current.updated_at + timedelta(microseconds=1)
        updated = Note(
            id=current.id,
            title=title,
            content=content,
            created_at=current.created_at,
            updated_at=now,
        )
        self._notes[index] = updated
        self._persist()
        logger.info("Updated note %s — '%s'", updated.id, updated.title)
        return updated

    def delete(self, note_id: str) -> bool:
        """Remove a note immediately.

        The UI goes through ``request_delete``/``confirm_delete`` instead.
        """
        index = self._index(note_id)
        if index is None:
            return False
        del self._notes[index]
        if self.selected_id == note_id:
            self.selected_id = None
        self._close_editor()
        self._persist()
        logger.info("Deleted note %s", note_id)
        return True

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select(self, note_id: str) -> bool:
        """Show a note in the detail view and close any open editor.

        Any delete awaiting confirmation is dropped.
        """
        if self._index(note_id) is None:
            logger.debug("Ignoring selection of unknown note %s", note_id)
            return False
        self.selected_id = note_id
        self.pending_delete_id = None
        self._close_editor()
        return True

    def clear_selection(self) -> None:
        self.selected_id = None

    # ------------------------------------------------------------------
    # Editor
    # ------------------------------------------------------------------

    def _close_editor(self) -> None:
        self.editor_mode = EditorMode.CLOSED
        self.draft = Draft()

    def open_create(self) -> None:
        self.draft = Draft()
        self.editor_mode = EditorMode.CREATE

    def open_edit(self) -> bool:
        """Open the editor on the selected note. No-op without a selection."""
        note = self.selected_note
        if note is None:
            logger.debug("Edit requested with no selected note")
            return False
        self.draft = Draft.from_note(note)
        self.editor_mode = EditorMode.EDIT
        return True

    def update_draft(
        self, title: str | None = None, content: str | None = None
    ) -> Draft:
        self.draft = Draft.clipped(
            title=self.draft.title if title is None else title,
            content=self.draft.content if content is None else content,
        )
        return self.draft

    def cancel_editor(self) -> None:
        self._close_editor()

    def submit_editor(self) -> Note | None:
        """Commit the draft according to the editor mode, then close it."""
        mode, draft = self.editor_mode, self.draft
        if mode is EditorMode.CREATE:
            note = self.create(draft.title, draft.content)
            self.selected_id = note.id
        elif mode is EditorMode.EDIT and self.selected_id is not None:
            note = self.update(self.selected_id, draft.title, draft.content)
        else:
            logger.debug("Submit ignored in editor mode %s", mode.value)
            return None
        self._close_editor()
        return note

    # ------------------------------------------------------------------
    # Deletion
    # ------------------------------------------------------------------

    def request_delete(self, note_id: str) -> bool:
        """First phase of deletion: remember which note awaits confirmation."""
        if self._index(note_id) is None:
            logger.debug("Ignoring delete request for unknown note %s", note_id)
            return False
        self.pending_delete_id = note_id
        return True

    def confirm_delete(self) -> bool:
        """Second phase: remove the pending note. Returns whether one was removed."""
        note_id, self.pending_delete_id = self.pending_delete_id, None
        if note_id is None:
            return False
        return self.delete(note_id)

    def cancel_delete(self) -> None:
        self.pending_delete_id = None
