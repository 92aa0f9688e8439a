"""
Overlay application state.

One ``OverlayState`` owns the pane index, the selection and the resize
capture for the lifetime of the overlay. The event loop hands it snapshot,
key and style events one at a time; each handler returns whether the view
needs to be redrawn.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence

from ..dispatch import CommandDispatcher
from ..models.panes import PaneDescriptor
from ..models.snapshot import SessionSnapshot
from .key_router import KeyPress, KeyRouter, Transition
from .pane_index import PaneIndex
from .resize_input import ResizeInputFSM
from .selection import SelectionTracker

logger = logging.getLogger(__name__)


class OverlayState:
    """All mutable state behind the overlay."""

    def __init__(self, dispatcher: CommandDispatcher):
        self.index = PaneIndex()
        self.selection = SelectionTracker()
        self.resize_input = ResizeInputFSM()
        self.palette: Dict[str, str] = {}
        self.is_loading = True
        self.router = KeyRouter(self.index, self.selection, self.resize_input, dispatcher)

    @property
    def cursor_pane(self) -> Optional[PaneDescriptor]:
        if self.selection.cursor is None:
            return None
        return self.index.get(self.selection.cursor)

    def handle_snapshot(self, sessions: Sequence[SessionSnapshot]) -> bool:
        """Rebuild the index and refresh the selection from a new snapshot."""
        under_cursor = self.cursor_pane
        self.index.rebuild(sessions)
        self.selection.realign(self.index, under_cursor)
        self.selection.refresh(sessions)
        self.is_loading = False
        return True

    def handle_key(self, press: KeyPress) -> Transition:
        return self.router.route(press)

    def handle_style(self, palette: Dict[str, str]) -> bool:
        self.palette = dict(palette)
        logger.debug(f"Palette updated ({len(self.palette)} colours)")
        return True

    def teardown(self) -> None:
        self.index.clear()
        self.selection.clear()
        self.selection.cursor = None
        self.resize_input.reset()
