"""Collapse/expand logic for the navigation panel."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

DEFAULT_COLLAPSE_BELOW = 600


class LayoutState:
    """Tracks whether the notes panel is expanded.

    The panel auto-collapses when the viewport is narrower than
    ``collapse_below`` pixels and auto-expands otherwise. A manual
    ``toggle()`` holds until the next resize.
    """

    def __init__(self, collapse_below: int = DEFAULT_COLLAPSE_BELOW) -> None:
        self.collapse_below = collapse_below
        self.expanded = True
        self.viewport_width: int | None = None

    def on_resize(self, width: int) -> bool:
        """Re-evaluate the panel for a new viewport width. Returns ``expanded``.

        Reporting the same width again is not a resize and keeps any
        manual toggle.
        """
        if width == self.viewport_width:
            return self.expanded
        self.viewport_width = width
        self.expanded = width >= self.collapse_below
        logger.debug("Viewport %dpx, panel expanded=%s", width, self.expanded)
        return self.expanded

    def toggle(self) -> bool:
        self.expanded = not self.expanded
        return self.expanded

    @property
    def sidebar_state(self) -> str:
        """Value for Streamlit's ``initial_sidebar_state``.

        ``"auto"`` until a width has been observed, which lets the browser
        apply its own narrow-viewport collapse.
        """
        if self.viewport_width is None:
            return "auto"
        return "expanded" if self.expanded else "collapsed"
