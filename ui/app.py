"""Simple Notes — Streamlit single-page interface.

Run with:
    streamlit run ui/app.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Ensure the project root is on sys.path so `notes.*` and `ui.*` imports
# resolve regardless of the working directory Streamlit uses.
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import streamlit as st  # noqa: E402

from notes.config import settings  # noqa: E402
from notes.layout import LayoutState  # noqa: E402

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)

if "layout" not in st.session_state:
    st.session_state.layout = LayoutState(settings.sidebar_collapse_width)

st.set_page_config(
    page_title="Notes",
    page_icon="📝",
    layout="wide",
    initial_sidebar_state=st.session_state.layout.sidebar_state,
)

from ui.components import detail, editor, session, sidebar  # noqa: E402

store = session.get_store()

width = session.viewport_width()
if width is not None:
    st.session_state.layout.on_resize(width)

sidebar.render(store, st.session_state.layout)

if store.editor_open:
    editor.render(store)
else:
    detail.render(store)
