"""Translate Textual key events into router key presses."""

import logging
from typing import Mapping, Optional

from ..config.constants import DEFAULT_KEYMAP
from ..core.key_router import InputKey, KeyPress

logger = logging.getLogger(__name__)

_KEYS_BY_NAME = {key.value: key for key in InputKey if key is not InputKey.CHAR}


def build_keymap(raw: Mapping[str, str] = DEFAULT_KEYMAP) -> dict[str, InputKey]:
    """Resolve a ``textual key -> action name`` mapping; unknown actions are dropped."""
    keymap: dict[str, InputKey] = {}
    for key, action in raw.items():
        input_key = _KEYS_BY_NAME.get(action)
        if input_key is None:
            logger.warning(f"Ignoring key {key!r}: unknown action {action!r}")
            continue
        keymap[key] = input_key
    return keymap


def translate_key(
    key: str, character: Optional[str], keymap: Mapping[str, InputKey]
) -> Optional[KeyPress]:
    """
    Map a Textual key to a ``KeyPress``.

    Mapped keys win over their printable character. Other printable
    characters become ``InputKey.CHAR`` presses; everything else is None.
    """
    if key in keymap:
        return KeyPress(keymap[key])
    if character and len(character) == 1 and character.isprintable():
        return KeyPress.character(character)
    return None
