"""
Workspace snapshot records.

A snapshot is the host's full, authoritative description of every session,
tab and pane at one point in time. Records are immutable; the core never
keeps anything from an older snapshot except the selected pane descriptor.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ..exceptions import NoCurrentSessionError


@dataclass(frozen=True)
class PaneGeometry:
    """Position and size of a pane in terminal cells."""

    x: int = 0
    y: int = 0
    columns: int = 0
    rows: int = 0

    def __str__(self) -> str:
        return f"{self.columns}x{self.rows}+{self.x}+{self.y}"


@dataclass(frozen=True)
class TabInfo:
    """One tab of a session."""

    position: int
    name: str = ""
    active: bool = False
    tab_id: Optional[int] = None

    @property
    def identity(self) -> int:
        """Stable tab identity; hosts that omit ``tab_id`` use the position."""
        return self.position if self.tab_id is None else self.tab_id


@dataclass(frozen=True)
class PaneRecord:
    """One pane as reported by the host."""

    id: int
    is_plugin: bool = False
    is_floating: bool = False
    is_focused: bool = False
    title: str = ""
    geometry: PaneGeometry = field(default_factory=PaneGeometry)


@dataclass(frozen=True)
class SessionSnapshot:
    """A session with its tabs and, keyed by tab position, their panes."""

    name: str
    is_current_session: bool
    tabs: List[TabInfo] = field(default_factory=list)
    panes: Dict[int, List[PaneRecord]] = field(default_factory=dict)

    def panes_for(self, tab: TabInfo) -> List[PaneRecord]:
        """Panes belonging to ``tab``, in snapshot order."""
        return self.panes.get(tab.position, [])

    def tab_by_id(self, tab_id: int) -> Optional[TabInfo]:
        for tab in self.tabs:
            if tab.identity == tab_id:
                return tab
        return None


def current_session(sessions: Sequence[SessionSnapshot]) -> SessionSnapshot:
    """Return the session marked current.

    Raises:
        NoCurrentSessionError: If no session is marked current. The host
            guarantees exactly one, so this is a contract breach.
    """
    for session in sessions:
        if session.is_current_session:
            return session
    raise NoCurrentSessionError(session_count=len(sessions))
