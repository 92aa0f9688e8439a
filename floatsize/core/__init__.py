"""Pane tracking and input state machine."""

from .key_router import InputKey, KeyPress, KeyRouter, Transition
from .pane_index import PaneIndex
from .resize_input import ResizeInputFSM, ResizeRequest, Stage, parse_percent
from .selection import SelectionTracker
from .state import OverlayState

__all__ = [
    "InputKey",
    "KeyPress",
    "KeyRouter",
    "OverlayState",
    "PaneIndex",
    "ResizeInputFSM",
    "ResizeRequest",
    "SelectionTracker",
    "Stage",
    "Transition",
    "parse_percent",
]
