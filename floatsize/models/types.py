"""TypedDict definitions for the snapshot document.

These mirror the JSON written by the workspace host. Parsed values are
turned into the dataclasses in ``floatsize.models.snapshot``.
"""

from __future__ import annotations

from typing import TypedDict


class PaneRecordDict(TypedDict, total=False):
    id: int
    is_plugin: bool
    is_floating: bool
    is_focused: bool
    title: str
    pane_x: int
    pane_y: int
    pane_columns: int
    pane_rows: int


class TabInfoDict(TypedDict, total=False):
    position: int
    name: str
    active: bool
    tab_id: int


class SessionDict(TypedDict, total=False):
    name: str
    is_current_session: bool
    tabs: list[TabInfoDict]
    # Keyed by tab position; JSON object keys arrive as strings.
    panes: dict[str, list[PaneRecordDict]]


class SnapshotDocumentDict(TypedDict, total=False):
    sessions: list[SessionDict]
    palette: dict[str, str]
