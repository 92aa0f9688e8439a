"""Custom exception hierarchy for floatsize.

Exception Hierarchy:
    FloatsizeError (base)
    ├── InvariantViolation - broken host contract or impossible core state (fatal)
    │   ├── NoCurrentSessionError
    │   └── CursorOutOfRangeError
    ├── SnapshotError - snapshot documents that cannot be read or parsed
    │   └── SnapshotFormatError
    ├── DispatchError - a host command (resize/hide/close) failed
    └── ConfigurationError - settings/configuration issues

Invariant violations are never caught inside the package. Everything else
is recoverable: the overlay logs it and keeps its previous state.

Usage:
    from floatsize.exceptions import SnapshotFormatError

    try:
        sessions = load_sessions(data)
    except SnapshotFormatError as e:
        logger.warning("Ignoring snapshot: %s", e)
"""

from typing import Any, Optional


class FloatsizeError(Exception):
    """Base exception for all floatsize errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., pane ids, paths)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# Invariant Violations
# =============================================================================


class InvariantViolation(FloatsizeError):
    """Base exception for states the host contract rules out."""

    pass


class NoCurrentSessionError(InvariantViolation):
    """A snapshot arrived without any session marked current."""

    def __init__(
        self,
        message: str = "No current session in snapshot",
        *,
        session_count: Optional[int] = None,
        **context: Any,
    ) -> None:
        if session_count is not None:
            context["session_count"] = session_count
        super().__init__(message, **context)


class CursorOutOfRangeError(InvariantViolation):
    """The cursor points outside the pane index."""

    def __init__(
        self,
        message: str = "Cursor outside pane index",
        *,
        cursor: Optional[int] = None,
        count: Optional[int] = None,
        **context: Any,
    ) -> None:
        if cursor is not None:
            context["cursor"] = cursor
        if count is not None:
            context["count"] = count
        super().__init__(message, **context)


# =============================================================================
# Snapshot Errors
# =============================================================================


class SnapshotError(FloatsizeError):
    """Base exception for snapshot loading."""

    pass


class SnapshotFormatError(SnapshotError):
    """A snapshot document does not have the expected shape."""

    def __init__(
        self,
        message: str = "Malformed snapshot",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)


# =============================================================================
# Dispatch Errors
# =============================================================================


class DispatchError(FloatsizeError):
    """A command sent to the workspace host failed."""

    def __init__(
        self,
        message: str = "Host command failed",
        *,
        command: Optional[str] = None,
        exit_code: Optional[int] = None,
        stderr: Optional[str] = None,
        **context: Any,
    ) -> None:
        if command:
            context["command"] = command[:100] + "..." if len(command) > 100 else command
        if exit_code is not None:
            context["exit_code"] = exit_code
        if stderr:
            context["stderr"] = stderr[:200] + "..." if len(stderr) > 200 else stderr
        super().__init__(message, **context)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(FloatsizeError):
    """Invalid configuration or environment settings."""

    def __init__(
        self,
        message: str = "Invalid configuration",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)
