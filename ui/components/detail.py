"""Main area: placeholder or the selected note's read-only view."""

from __future__ import annotations

import streamlit as st

from notes.display import display_title, format_timestamp
from notes.store import NotesStore


def _render_placeholder(store: NotesStore) -> None:
    st.title("Welcome to Notes!")
    st.caption("Select a note from the left or create a new note to get started.")
    st.button("＋ New Note", key="new_note_main", on_click=store.open_create)


def _render_delete_prompt(store: NotesStore) -> None:
    st.warning("Delete this note?")
    confirm_col, cancel_col, _ = st.columns([1, 1, 4])
    confirm_col.button(
        "Delete", key="confirm_delete", type="primary", on_click=store.confirm_delete
    )
    cancel_col.button("Cancel", key="cancel_delete", on_click=store.cancel_delete)


def render(store: NotesStore) -> None:
    """Render the detail view for the selected note."""
    note = store.selected_note
    if note is None:
        _render_placeholder(store)
        return

    title_col, edit_col, delete_col = st.columns([6, 1, 1])
    title_col.title(display_title(note))
    edit_col.button("✏️ Edit", key="edit_note", on_click=store.open_edit)
    delete_col.button(
        "🗑 Delete",
        key="delete_note",
        on_click=store.request_delete,
        args=(note.id,),
    )

    if store.pending_delete_id == note.id:
        _render_delete_prompt(store)

    st.caption(
        f"Created: {format_timestamp(note.created_at)} | "
        f"Updated: {format_timestamp(note.updated_at)}"
    )
    if note.content:
        st.text(note.content)
    else:
        st.markdown("*(No content)*")
