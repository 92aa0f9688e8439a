"""Data models for floatsize."""

from .panes import PaneDescriptor, TabRef
from .snapshot import PaneGeometry, PaneRecord, SessionSnapshot, TabInfo, current_session

__all__ = [
    "PaneDescriptor",
    "PaneGeometry",
    "PaneRecord",
    "SessionSnapshot",
    "TabInfo",
    "TabRef",
    "current_session",
]
