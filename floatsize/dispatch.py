"""
Outbound commands to the workspace host.

The core only talks to a ``CommandDispatcher``. ``ZellijDispatcher`` drives
a running zellij session through ``zellij action``; ``LoggingDispatcher``
records calls without touching the host (dry runs and tests).
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import asdict, dataclass
from typing import List, Optional, Protocol, Sequence, Tuple, runtime_checkable

from .exceptions import DispatchError

logger = logging.getLogger(__name__)

ZELLIJ_TIMEOUT_SECONDS = 10


@dataclass(frozen=True)
class ResizeCommand:
    """Overwrite one floating pane's size, in percent of the tab."""

    tab_id: int
    pane_id: int
    is_plugin: bool
    width: int
    height: int

    @property
    def pane_ref(self) -> str:
        kind = "plugin" if self.is_plugin else "terminal"
        return f"{kind}_{self.pane_id}"

    def to_dict(self) -> dict:
        return {**asdict(self), "pane_ref": self.pane_ref}


@runtime_checkable
class CommandDispatcher(Protocol):
    """What the overlay needs from its host."""

    def resize(self, command: ResizeCommand) -> None:
        """Resize a floating pane."""
        ...

    def hide_overlay(self) -> None:
        """Hide the overlay without closing it."""
        ...

    def close_overlay(self) -> None:
        """Close the overlay's own pane."""
        ...


class ZellijDispatcher:
    """Send commands to the zellij session this process runs in."""

    def __init__(self, session: Optional[str] = None, binary: str = "zellij"):
        self.session = session
        self.binary = binary

    def _action(self, *args: str) -> None:
        cmd = [self.binary]
        if self.session:
            cmd.extend(["-s", self.session])
        cmd.extend(["action", *args])
        command_str = " ".join(cmd)

        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, timeout=ZELLIJ_TIMEOUT_SECONDS
            )
        except subprocess.TimeoutExpired as e:
            raise DispatchError("zellij action timed out", command=command_str) from e
        except OSError as e:
            raise DispatchError(f"Could not run {self.binary}: {e}", command=command_str) from e

        if result.returncode != 0:
            raise DispatchError(
                "zellij action failed",
                command=command_str,
                exit_code=result.returncode,
                stderr=result.stderr.strip(),
            )
        logger.debug(f"Ran: {command_str}")

    def resize(self, command: ResizeCommand) -> None:
        logger.info(
            f"Resizing {command.pane_ref} in tab {command.tab_id} "
            f"to {command.width}%x{command.height}%"
        )
        self._action(
            "change-floating-pane-coordinates",
            "--pane-id",
            command.pane_ref,
            "--width",
            f"{command.width}%",
            "--height",
            f"{command.height}%",
        )

    def hide_overlay(self) -> None:
        logger.info("Hiding overlay")
        self._action("toggle-floating-panes")

    def close_overlay(self) -> None:
        logger.info("Closing overlay")
        self._action("close-pane")


class LoggingDispatcher:
    """Record commands instead of sending them."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Optional[ResizeCommand]]] = []

    @property
    def resizes(self) -> Sequence[ResizeCommand]:
        return [command for name, command in self.calls if name == "resize" and command]

    def resize(self, command: ResizeCommand) -> None:
        logger.info(f"[dry-run] resize {command.to_dict()}")
        self.calls.append(("resize", command))

    def hide_overlay(self) -> None:
        logger.info("[dry-run] hide overlay")
        self.calls.append(("hide_overlay", None))

    def close_overlay(self) -> None:
        logger.info("[dry-run] close overlay")
        self.calls.append(("close_overlay", None))
