"""
Selection and cursor tracking.

The cursor is a key into the current ``PaneIndex``; the selection is a
copied descriptor that survives rebuilds. The two are independent: moving
the cursor never changes the selection.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ..exceptions import CursorOutOfRangeError
from ..models.panes import PaneDescriptor
from ..models.snapshot import SessionSnapshot, current_session
from .pane_index import PaneIndex

logger = logging.getLogger(__name__)


@dataclass
class SelectionTracker:
    """At most one selected pane plus a 1-based cursor."""

    selected: Optional[PaneDescriptor] = None
    cursor: Optional[int] = None

    @property
    def has_selection(self) -> bool:
        return self.selected is not None

    def move_down(self, count: int) -> None:
        """Advance the cursor, wrapping from ``count`` back to 1."""
        if count < 1:
            return
        if self.cursor is None:
            self.cursor = 1
        elif 1 <= self.cursor < count:
            self.cursor += 1
        elif self.cursor == count:
            self.cursor = 1
        else:
            raise CursorOutOfRangeError(cursor=self.cursor, count=count)

    def move_up(self, count: int) -> None:
        """Step the cursor back, wrapping from 1 to ``count``."""
        if count < 1:
            return
        if self.cursor is None:
            self.cursor = 1
        elif 1 < self.cursor <= count:
            self.cursor -= 1
        elif self.cursor == 1:
            self.cursor = count
        else:
            raise CursorOutOfRangeError(cursor=self.cursor, count=count)

    def select_at_cursor(self, index: PaneIndex) -> bool:
        """Select the pane under the cursor if nothing is selected yet.

        Returns:
            True if a pane became selected.
        """
        if self.selected is not None or self.cursor is None:
            return False
        pane = index.get(self.cursor)
        if pane is None:
            return False
        self.selected = pane
        logger.debug(f"Selected {pane.pane_ref} in tab {pane.parent_tab.tab_id}")
        return True

    def clear(self) -> None:
        self.selected = None

    def realign(self, index: PaneIndex, previous: Optional[PaneDescriptor]) -> None:
        """Keep the cursor inside ``index`` after a rebuild.

        ``previous`` is the pane the cursor pointed at before the rebuild.
        If it is still present the cursor follows it to its new key,
        otherwise the cursor is clamped to the new count.
        """
        if self.cursor is None:
            return
        count = len(index)
        if count == 0:
            self.cursor = None
            return
        if previous is not None:
            for key, pane in index.items():
                if pane.identity == previous.identity:
                    self.cursor = key
                    return
        self.cursor = min(max(self.cursor, 1), count)

    def refresh(self, sessions: Sequence[SessionSnapshot]) -> bool:
        """Re-read the selected pane from the newest snapshot.

        The pane is found by tab id, then by pane id within that tab. If
        either lookup fails the stale descriptor is kept as-is.

        Returns:
            True if the descriptor was replaced.
        """
        if self.selected is None:
            return False

        session = current_session(sessions)
        tab_id, pane_id = self.selected.identity
        tab = session.tab_by_id(tab_id)
        if tab is None:
            logger.debug(f"Selected tab {tab_id} missing from snapshot; keeping stale pane")
            return False

        for record in session.panes_for(tab):
            if record.id == pane_id:
                self.selected = PaneDescriptor.from_record(record, tab)
                return True

        logger.debug(f"Selected pane {pane_id} missing from tab {tab_id}; keeping stale pane")
        return False
