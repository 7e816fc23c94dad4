"""Navigation panel: new-note action and the list of notes."""

from __future__ import annotations

import streamlit as st

from notes.display import display_title, last_modified
from notes.layout import LayoutState
from notes.store import NotesStore


def render(store: NotesStore, layout: LayoutState) -> None:
    """Render the collapsible notes panel in the Streamlit sidebar."""
    with st.sidebar:
        head_col, toggle_col = st.columns([4, 1])
        head_col.markdown("### ● Notes")
        toggle_col.button(
            "◀" if layout.expanded else "▶",
            key="sidebar_toggle",
            help="Toggle notes list",
            on_click=layout.toggle,
        )
        if not layout.expanded:
            return

        st.button(
            "＋ New Note",
            key="new_note",
            use_container_width=True,
            type="primary",
            on_click=store.open_create,
        )

        notes = store.list()
        if not notes:
            st.caption("No notes yet.")
            return

        for note in notes:
            selected = note.id == store.selected_id
            st.button(
                f"{'▸ ' if selected else ''}{display_title(note)}",
                key=f"note_{note.id}",
                help=f"Last modified {last_modified(note)}",
                use_container_width=True,
                type="secondary",
                on_click=store.select,
                args=(note.id,),
            )
            st.caption(last_modified(note))
