"""
The floatsize overlay.

A Textual app around ``OverlayState``. Snapshot polling, key presses and
theme changes all arrive on the app's event loop, so the core sees them
strictly one after another.
"""

import logging
from typing import Mapping, Optional

from textual.app import App, ComposeResult
from textual.css.query import NoMatches
from textual.widgets import Static

from ..config.constants import DEFAULT_KEYMAP, DEFAULT_POLL_INTERVAL_SECONDS
from ..core.key_router import Transition
from ..core.state import OverlayState
from ..dispatch import CommandDispatcher
from ..exceptions import DispatchError, SnapshotError
from ..sources import JsonFileSnapshotSource
from .keys import build_keymap, translate_key
from .pane_view import render_header, render_hints, render_input_bar, render_pane_table
from .themes import FLOATSIZE_DARK, HOST_THEME_NAME, register_all_themes, theme_from_palette

logger = logging.getLogger(__name__)


class FloatsizeApp(App[None]):
    """Browse floating panes and resize the selected one."""

    CSS = """
    #header {
        height: 1;
        padding: 0 1;
        background: $panel;
    }

    #pane-list {
        height: 1fr;
        overflow-y: auto;
    }

    #input-bar {
        height: 1;
        padding: 0 1;
        background: $boost;
    }

    #key-hints {
        height: 1;
        padding: 0 1;
    }
    """

    def __init__(
        self,
        source: JsonFileSnapshotSource,
        dispatcher: CommandDispatcher,
        *,
        poll_interval: float = DEFAULT_POLL_INTERVAL_SECONDS,
        theme_name: Optional[str] = None,
        keymap: Mapping[str, str] = DEFAULT_KEYMAP,
    ):
        super().__init__()
        self.source = source
        self.state = OverlayState(dispatcher)
        self.poll_interval = poll_interval
        self.keymap = build_keymap(keymap)
        self._initial_theme = theme_name or FLOATSIZE_DARK.name

    def compose(self) -> ComposeResult:
        yield Static(id="header")
        yield Static(id="pane-list")
        yield Static(id="input-bar")
        yield Static(id="key-hints")

    def on_mount(self) -> None:
        register_all_themes(self)
        if self.get_theme(self._initial_theme) is None:
            logger.warning(f"Unknown theme {self._initial_theme!r}, using {FLOATSIZE_DARK.name}")
            self._initial_theme = FLOATSIZE_DARK.name
        self.theme = self._initial_theme
        self.theme_changed_signal.subscribe(self, self._on_theme_changed)

        self.poll_snapshot()
        self.set_interval(self.poll_interval, self.poll_snapshot)
        self.refresh_view()

    def poll_snapshot(self) -> None:
        """Pull the next snapshot, if any, into the state."""
        try:
            event = self.source.poll()
        except (SnapshotError, OSError) as e:
            logger.warning(f"Ignoring snapshot from {self.source.path}: {e}")
            self.notify(f"Bad snapshot: {e}", severity="error")
            return
        if event is None:
            return

        if event.palette and event.palette != self.state.palette:
            self.apply_palette(event.palette)
        self.state.handle_snapshot(event.sessions)
        self.refresh_view()

    def apply_palette(self, palette: Mapping[str, str]) -> None:
        """Style update from the host: derive and switch to a matching theme."""
        self.state.handle_style(dict(palette))
        self.register_theme(theme_from_palette(palette))
        self.theme = HOST_THEME_NAME

    def _on_theme_changed(self, _theme) -> None:
        self.refresh_view()

    def on_key(self, event) -> None:
        press = translate_key(event.key, event.character, self.keymap)
        if press is None:
            return
        event.stop()
        event.prevent_default()

        try:
            transition = self.state.handle_key(press)
        except DispatchError as e:
            logger.error(f"Host command failed: {e}")
            self.notify(str(e), severity="error")
            self.refresh_view()
            return

        if transition is Transition.RESIZE_SENT:
            self.notify("Resize sent", timeout=2)
        elif transition is Transition.CLOSE_OVERLAY:
            self.exit()
            return
        self.refresh_view()

    def refresh_view(self) -> None:
        try:
            self.query_one("#header", Static).update(render_header(self.state, self))
            self.query_one("#pane-list", Static).update(render_pane_table(self.state, self))
            self.query_one("#input-bar", Static).update(render_input_bar(self.state, self))
            self.query_one("#key-hints", Static).update(render_hints(self.state, self))
        except NoMatches:
            # Not composed yet (or already torn down)
            return

    def on_unmount(self) -> None:
        self.state.teardown()
