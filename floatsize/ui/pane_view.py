"""
Renderables for the overlay.

Pure functions of ``OverlayState`` so the app can redraw after any event
without caring which one it was.
"""

from typing import Optional

from rich import box
from rich.markup import escape
from rich.table import Table
from rich.text import Text
from textual.app import App

from ..core.resize_input import Stage
from ..core.state import OverlayState
from .theme_colors import paint, role_style

NAVIGATION_HINTS = "↑/↓ move · enter select · esc hide · ctrl+e close"
CAPTURE_HINTS = "0-9 type · enter next · ctrl+s apply · ctrl+r reset · esc deselect"


def render_header(state: OverlayState, app: Optional[App] = None) -> str:
    if state.is_loading:
        return paint(app, "hint", "Waiting for workspace snapshot…")
    count = len(state.index)
    noun = "pane" if count == 1 else "panes"
    return paint(app, "header", f"Floating {noun}: {count}")


def render_pane_table(state: OverlayState, app: Optional[App] = None) -> Table:
    """One row per indexed pane; the cursor row is highlighted."""
    table = Table(box=box.SIMPLE, expand=True, show_edge=False)
    table.add_column("#", justify="right", width=3)
    table.add_column("", width=1)
    table.add_column("Tab")
    table.add_column("Pane")
    table.add_column("Title", ratio=1, overflow="ellipsis", no_wrap=True)
    table.add_column("Size", justify="right")

    selected = state.selection.selected
    cursor = state.selection.cursor
    cursor_style = f"reverse {role_style(app, 'cursor')}"
    marker_style = role_style(app, "marker")

    for key, pane in state.index.items():
        is_selected = selected is not None and pane.identity == selected.identity
        table.add_row(
            str(key),
            Text("●", style=marker_style) if is_selected else "",
            escape(pane.parent_tab.name or str(pane.parent_tab.position)),
            pane.pane_ref,
            escape(pane.title),
            f"{pane.geometry.columns}x{pane.geometry.rows}",
            style=cursor_style if key == cursor else None,
        )
    return table


def _value(buffer: str, committed: int, active: bool) -> str:
    if active:
        return f"{buffer}▏"
    return str(committed) if committed else "–"


def render_input_bar(state: OverlayState, app: Optional[App] = None) -> str:
    """Selected pane plus the width/height being typed."""
    pane = state.selection.selected
    if pane is None:
        return paint(app, "hint", "No pane selected")

    fsm = state.resize_input
    on_width = fsm.stage is Stage.AWAITING_WIDTH
    width = _value(fsm.buffer, fsm.width, on_width)
    height = _value(fsm.buffer, fsm.height, not on_width)
    label = escape(pane.title or pane.pane_ref)
    prompt = "width" if on_width else "height"
    return (
        f"{paint(app, 'pane_label', label)} "
        f"{paint(app, 'hint', f'({pane.pane_ref}, tab {pane.parent_tab.tab_id})')}  "
        f"width {paint(app, 'pending_size', width + '%')}  "
        f"height {paint(app, 'pending_size', height + '%')}  "
        f"{paint(app, 'hint', f'enter {prompt}')}"
    )


def render_hints(state: OverlayState, app: Optional[App] = None) -> str:
    hints = CAPTURE_HINTS if state.selection.has_selection else NAVIGATION_HINTS
    return paint(app, "hint", hints)
