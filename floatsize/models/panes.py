"""Pane descriptors tracked by the overlay."""

from __future__ import annotations

from dataclasses import dataclass, field

from .snapshot import PaneGeometry, PaneRecord, TabInfo


@dataclass(frozen=True)
class TabRef:
    """The owning tab of a pane, copied out of a snapshot."""

    tab_id: int
    position: int
    name: str = ""


@dataclass(frozen=True)
class PaneDescriptor:
    """A snapshot-independent copy of one floating pane.

    Only identity matters to the core: ``(parent_tab.tab_id, pane_id)``
    for lookups and ``is_plugin`` for addressing. Everything else is passed
    through to rendering.
    """

    pane_id: int
    is_plugin: bool
    parent_tab: TabRef
    is_floating: bool = True
    is_focused: bool = False
    title: str = ""
    geometry: PaneGeometry = field(default_factory=PaneGeometry)

    @classmethod
    def from_record(cls, record: PaneRecord, tab: TabInfo) -> "PaneDescriptor":
        return cls(
            pane_id=record.id,
            is_plugin=record.is_plugin,
            parent_tab=TabRef(tab_id=tab.identity, position=tab.position, name=tab.name),
            is_floating=record.is_floating,
            is_focused=record.is_focused,
            title=record.title,
            geometry=record.geometry,
        )

    @property
    def pane_ref(self) -> str:
        """Kind-qualified pane id, e.g. ``terminal_3`` or ``plugin_1``."""
        kind = "plugin" if self.is_plugin else "terminal"
        return f"{kind}_{self.pane_id}"

    @property
    def identity(self) -> tuple[int, int]:
        return (self.parent_tab.tab_id, self.pane_id)
