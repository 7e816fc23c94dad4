"""Per-session store construction and browser viewport probing."""

from __future__ import annotations

import streamlit as st
from streamlit_js_eval import streamlit_js_eval

from notes.config import settings
from notes.storage import LocalStorage, NotesRepository
from notes.store import NotesStore


def get_store() -> NotesStore:
    """Return this session's store, loading it from storage on first use."""
    if "store" not in st.session_state:
        repository = NotesRepository(LocalStorage(settings.notes_storage_path))
        st.session_state.store = NotesStore(repository)
    return st.session_state.store


def viewport_width() -> int | None:
    """Browser ``window.innerWidth``, or ``None`` until the page reports it."""
    width = streamlit_js_eval(js_expressions="window.innerWidth", key="viewport_width")
    if width is None:
        return None
    return int(width)
