"""
Positional index of the floating panes in the current session.

Keys are dense and 1-based. They are positional, not stable identities: a
key that pointed at one pane before a rebuild may point at another after.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..models.panes import PaneDescriptor
from ..models.snapshot import SessionSnapshot, current_session

logger = logging.getLogger(__name__)


class PaneIndex:
    """Keyed table ``1..=count -> PaneDescriptor``, rebuilt per snapshot."""

    def __init__(self) -> None:
        self._panes: Dict[int, PaneDescriptor] = {}

    def rebuild(self, sessions: Sequence[SessionSnapshot]) -> None:
        """Replace the index with the floating panes of the current session.

        Panes are keyed tab-major, pane-minor in snapshot order.

        Raises:
            NoCurrentSessionError: If no session is marked current.
        """
        session = current_session(sessions)
        floating: List[PaneDescriptor] = []
        for tab in session.tabs:
            for record in session.panes_for(tab):
                if record.is_floating:
                    floating.append(PaneDescriptor.from_record(record, tab))

        self._panes.clear()
        for key, pane in enumerate(floating, start=1):
            self._panes[key] = pane
        logger.debug(f"Rebuilt pane index for session {session.name!r}: {len(floating)} floating")

    def get(self, key: int) -> Optional[PaneDescriptor]:
        return self._panes.get(key)

    def keys(self) -> List[int]:
        return list(self._panes)

    def items(self) -> List[Tuple[int, PaneDescriptor]]:
        return list(self._panes.items())

    def clear(self) -> None:
        self._panes.clear()

    def __len__(self) -> int:
        return len(self._panes)

    def __iter__(self) -> Iterator[PaneDescriptor]:
        return iter(self._panes.values())

    def __contains__(self, key: object) -> bool:
        return key in self._panes
