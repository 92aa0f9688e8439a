"""
Two-stage numeric capture for resize requests.

Digits accumulate in a buffer. The first commit turns the buffer into the
width, the second into the height and yields a ``ResizeRequest``. Values
are percentages in the unsigned 8-bit range; anything else becomes 0.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)

MAX_PERCENT = 255
DIGITS = frozenset("0123456789")


class Stage(Enum):
    """Which dimension the buffer is collecting."""

    AWAITING_WIDTH = "width"
    AWAITING_HEIGHT = "height"


@dataclass(frozen=True)
class ResizeRequest:
    """A completed width/height pair, both in percent."""

    width: int
    height: int


def parse_percent(buffer: str) -> int:
    """Parse a digit buffer as an unsigned 8-bit value.

    Empty, non-numeric or out-of-range buffers parse to 0.
    """
    if not buffer or not all(c in DIGITS for c in buffer):
        return 0
    significant = buffer.lstrip("0")
    # More significant digits than MAX_PERCENT has is always out of range
    if len(significant) > len(str(MAX_PERCENT)):
        return 0
    value = int(significant or "0")
    return value if value <= MAX_PERCENT else 0


@dataclass
class ResizeInputFSM:
    """Width-then-height capture state."""

    buffer: str = ""
    stage: Stage = Stage.AWAITING_WIDTH
    width: int = 0
    height: int = 0

    def push_digit(self, char: str) -> bool:
        """Append ``char`` if it is a single ASCII digit."""
        if char not in DIGITS:
            return False
        self.buffer += char
        return True

    def commit(self) -> Optional[ResizeRequest]:
        """Commit the buffer to the current stage.

        Returns:
            The finished request when the height stage commits, else None.
        """
        value = parse_percent(self.buffer)
        self.buffer = ""
        if self.stage is Stage.AWAITING_WIDTH:
            self.width = value
            self.stage = Stage.AWAITING_HEIGHT
            logger.debug(f"Width committed: {value}%")
            return None

        self.height = value
        request = ResizeRequest(width=self.width, height=self.height)
        logger.debug(f"Height committed: {value}%")
        self.reset()
        return request

    def flush(self) -> ResizeRequest:
        """Fold any typed digits into the current stage and hand back the pair.

        Used by the confirm key, which sends whatever has been entered so
        far. The capture state is reset afterwards.
        """
        if self.buffer:
            value = parse_percent(self.buffer)
            if self.stage is Stage.AWAITING_WIDTH:
                self.width = value
            else:
                self.height = value
        request = ResizeRequest(width=self.width, height=self.height)
        self.reset()
        return request

    def reset(self) -> None:
        self.buffer = ""
        self.stage = Stage.AWAITING_WIDTH
        self.width = 0
        self.height = 0

    @property
    def is_pristine(self) -> bool:
        return (
            not self.buffer
            and self.stage is Stage.AWAITING_WIDTH
            and self.width == 0
            and self.height == 0
        )
