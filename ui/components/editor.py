"""Create/edit form for a note."""

from __future__ import annotations

import streamlit as st

from notes.models import CONTENT_MAX_LENGTH, TITLE_MAX_LENGTH
from notes.store import EditorMode, NotesStore


def render(store: NotesStore) -> None:
    """Render the editor form bound to the store's draft."""
    editing = store.editor_mode is EditorMode.EDIT
    st.title("Edit Note" if editing else "New Note")

    with st.form("editor_form", clear_on_submit=False):
        title = st.text_input(
            "Title",
            value=store.draft.title,
            max_chars=TITLE_MAX_LENGTH,
            placeholder="Title",
        )
        content = st.text_area(
            "Content",
            value=store.draft.content,
            max_chars=CONTENT_MAX_LENGTH,
            height=220,
            placeholder="Note content...",
        )
        cancel_col, submit_col, _ = st.columns([1, 1, 4])
        cancelled = cancel_col.form_submit_button("Cancel")
        submitted = submit_col.form_submit_button(
            "Save Changes" if editing else "Create Note", type="primary"
        )

    if cancelled:
        store.cancel_editor()
        st.rerun()
    if submitted:
        store.update_draft(title=title, content=content)
        note = store.submit_editor()
        if note is not None:
            st.toast(f"Saved '{note.title}'")
        st.rerun()
