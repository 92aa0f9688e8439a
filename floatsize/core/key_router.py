"""
Key routing for the overlay.

Every key press resolves to exactly one ``Transition``. When a key means
different things with and without a selection (enter, escape, delete), the
selection-scoped meaning is checked first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from ..dispatch import CommandDispatcher, ResizeCommand
from ..models.panes import PaneDescriptor
from .pane_index import PaneIndex
from .resize_input import ResizeInputFSM, ResizeRequest
from .selection import SelectionTracker

logger = logging.getLogger(__name__)


class InputKey(Enum):
    """Semantic keys the router understands."""

    DOWN = "down"
    UP = "up"
    ENTER = "enter"
    ESCAPE = "escape"
    DELETE = "delete"
    RESIZE_CONFIRM = "resize_confirm"
    RESIZE_ABORT = "resize_abort"
    EXIT = "exit"
    CHAR = "char"


@dataclass(frozen=True)
class KeyPress:
    """A single key event; ``char`` is only meaningful for ``InputKey.CHAR``."""

    key: InputKey
    char: str = ""

    @classmethod
    def character(cls, char: str) -> "KeyPress":
        return cls(InputKey.CHAR, char)


class Transition(Enum):
    """What a key press did."""

    CURSOR_MOVED = "cursor_moved"
    PANE_SELECTED = "pane_selected"
    SELECTION_CLEARED = "selection_cleared"
    WIDTH_COMMITTED = "width_committed"
    RESIZE_SENT = "resize_sent"
    RESIZE_ABORTED = "resize_aborted"
    DIGIT_CAPTURED = "digit_captured"
    HIDE_OVERLAY = "hide_overlay"
    CLOSE_OVERLAY = "close_overlay"
    IGNORED = "ignored"


class KeyRouter:
    """Apply one key press to the index, selection and resize capture."""

    def __init__(
        self,
        index: PaneIndex,
        selection: SelectionTracker,
        resize_input: ResizeInputFSM,
        dispatcher: CommandDispatcher,
    ):
        self.index = index
        self.selection = selection
        self.resize_input = resize_input
        self.dispatcher = dispatcher

    def route(self, press: KeyPress) -> Transition:
        transition = self._route(press)
        logger.debug(f"{press.key.value}{press.char!r} -> {transition.value}")
        return transition

    def _route(self, press: KeyPress) -> Transition:
        key = press.key
        selected = self.selection.has_selection

        if key is InputKey.DOWN:
            self.selection.move_down(len(self.index))
            return Transition.CURSOR_MOVED
        if key is InputKey.UP:
            self.selection.move_up(len(self.index))
            return Transition.CURSOR_MOVED

        if key is InputKey.ENTER:
            if selected:
                return self._commit_stage()
            if self.selection.select_at_cursor(self.index):
                return Transition.PANE_SELECTED
            return Transition.IGNORED

        if key is InputKey.CHAR:
            if selected and self.resize_input.push_digit(press.char):
                return Transition.DIGIT_CAPTURED
            return Transition.IGNORED

        if key is InputKey.RESIZE_CONFIRM:
            if not selected:
                return Transition.IGNORED
            self._send(self.resize_input.flush())
            return Transition.RESIZE_SENT

        if key is InputKey.RESIZE_ABORT:
            if not selected:
                return Transition.IGNORED
            self.resize_input.reset()
            return Transition.RESIZE_ABORTED

        if key in (InputKey.ESCAPE, InputKey.DELETE):
            if selected:
                self.selection.clear()
                self.resize_input.reset()
                return Transition.SELECTION_CLEARED
            self.dispatcher.hide_overlay()
            return Transition.HIDE_OVERLAY

        if key is InputKey.EXIT:
            self.dispatcher.close_overlay()
            return Transition.CLOSE_OVERLAY

        return Transition.IGNORED

    def _commit_stage(self) -> Transition:
        request = self.resize_input.commit()
        if request is None:
            return Transition.WIDTH_COMMITTED
        self._send(request)
        return Transition.RESIZE_SENT

    def _send(self, request: ResizeRequest) -> None:
        pane: PaneDescriptor = self.selection.selected
        self.dispatcher.resize(
            ResizeCommand(
                tab_id=pane.parent_tab.tab_id,
                pane_id=pane.pane_id,
                is_plugin=pane.is_plugin,
                width=request.width,
                height=request.height,
            )
        )
