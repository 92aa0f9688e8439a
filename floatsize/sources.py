"""
Snapshot sources.

The host writes its workspace snapshot as JSON (see ``models.types`` for
the shape). ``JsonFileSnapshotSource`` is polled from the UI loop and only
reports a snapshot when the file has changed since the previous poll.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, cast

from .exceptions import SnapshotFormatError
from .models.snapshot import PaneGeometry, PaneRecord, SessionSnapshot, TabInfo
from .models.types import PaneRecordDict, SessionDict, TabInfoDict

logger = logging.getLogger(__name__)


@dataclass
class SnapshotEvent:
    """One delivery from the host: sessions plus an optional palette."""

    sessions: List[SessionSnapshot]
    palette: Dict[str, str] = field(default_factory=dict)


def _require(mapping: Any, what: str) -> Dict[str, Any]:
    if not isinstance(mapping, dict):
        raise SnapshotFormatError(f"Expected an object for {what}", got=type(mapping).__name__)
    return mapping


def _int(value: Any, what: str, default: Optional[int] = None) -> int:
    if value is None and default is not None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise SnapshotFormatError(f"Expected an integer for {what}", got=value)
    return value


def _parse_pane(raw: Any) -> PaneRecord:
    data = cast(PaneRecordDict, _require(raw, "pane"))
    return PaneRecord(
        id=_int(data.get("id"), "pane id"),
        is_plugin=bool(data.get("is_plugin", False)),
        is_floating=bool(data.get("is_floating", False)),
        is_focused=bool(data.get("is_focused", False)),
        title=str(data.get("title", "")),
        geometry=PaneGeometry(
            x=_int(data.get("pane_x"), "pane_x", 0),
            y=_int(data.get("pane_y"), "pane_y", 0),
            columns=_int(data.get("pane_columns"), "pane_columns", 0),
            rows=_int(data.get("pane_rows"), "pane_rows", 0),
        ),
    )


def _parse_tab(raw: Any) -> TabInfo:
    data = cast(TabInfoDict, _require(raw, "tab"))
    tab_id = data.get("tab_id")
    return TabInfo(
        position=_int(data.get("position"), "tab position"),
        name=str(data.get("name", "")),
        active=bool(data.get("active", False)),
        tab_id=None if tab_id is None else _int(tab_id, "tab_id"),
    )


def _parse_session(raw: Any) -> SessionSnapshot:
    data = cast(SessionDict, _require(raw, "session"))
    tabs_raw = data.get("tabs", [])
    if not isinstance(tabs_raw, list):
        raise SnapshotFormatError("Expected a list of tabs", session=data.get("name"))

    panes: Dict[int, List[PaneRecord]] = {}
    for position, records in _require(data.get("panes", {}), "panes").items():
        try:
            key = int(position)
        except (TypeError, ValueError) as e:
            raise SnapshotFormatError("Pane groups must be keyed by tab position", got=position) from e
        if not isinstance(records, list):
            raise SnapshotFormatError("Expected a list of panes", tab_position=key)
        panes[key] = [_parse_pane(record) for record in records]

    return SessionSnapshot(
        name=str(data.get("name", "")),
        is_current_session=bool(data.get("is_current_session", False)),
        tabs=[_parse_tab(tab) for tab in tabs_raw],
        panes=panes,
    )


def load_sessions(data: Any) -> List[SessionSnapshot]:
    """Parse a snapshot document into sessions.

    Accepts ``{"sessions": [...]}`` or a bare list of sessions.

    Raises:
        SnapshotFormatError: If the document does not have that shape.
    """
    sessions = data.get("sessions") if isinstance(data, dict) else data
    if not isinstance(sessions, list):
        raise SnapshotFormatError("Snapshot must contain a list of sessions")
    return [_parse_session(session) for session in sessions]


def load_palette(data: Any) -> Dict[str, str]:
    if not isinstance(data, dict):
        return {}
    palette = data.get("palette") or {}
    if not isinstance(palette, dict):
        raise SnapshotFormatError("Palette must be an object")
    return {str(name): str(colour) for name, colour in palette.items()}


def read_snapshot_file(path: Path) -> SnapshotEvent:
    """Read and parse a snapshot file.

    Raises:
        SnapshotFormatError: On invalid JSON or an unexpected shape.
        OSError: If the file cannot be read.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SnapshotFormatError(f"Invalid JSON: {e.msg}", path=str(path)) from e
    except UnicodeDecodeError as e:
        raise SnapshotFormatError(f"Snapshot is not UTF-8: {e.reason}", path=str(path)) from e
    return SnapshotEvent(sessions=load_sessions(data), palette=load_palette(data))


class JsonFileSnapshotSource:
    """Poll a JSON snapshot file for changes."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._signature: Optional[Tuple[int, int]] = None

    def poll(self) -> Optional[SnapshotEvent]:
        """Return a new event if the file changed since the last poll."""
        try:
            stat = self.path.stat()
        except FileNotFoundError:
            logger.debug(f"Snapshot file {self.path} not found")
            return None

        signature = (stat.st_mtime_ns, stat.st_size)
        if signature == self._signature:
            return None

        # A broken file is reported once per change, not on every poll.
        self._signature = signature
        return read_snapshot_file(self.path)
