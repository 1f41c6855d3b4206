"""Error types for script execution.

Error codes are stable strings for programmatic handling. Remote faults map
from both JSON Wire numeric statuses and W3C error strings.
"""

from __future__ import annotations

from typing import Any


class WebDriverExecError(Exception):
    """Base error for all webdriver-exec exceptions."""

    code: str = "internal_error"
    message: str = "An internal error occurred"

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.__class__.message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Render as an error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }


class InvalidArgumentError(WebDriverExecError):
    """Script or argument rejected locally; no request was sent."""

    code = "invalid_argument"
    message = "number or type of arguments don't agree with execute protocol command"


class TransportError(WebDriverExecError):
    """The dispatcher could not deliver the request or read a response."""

    code = "transport_error"
    message = "Transport failure"


class CancellationError(WebDriverExecError):
    """Async script invalidated by a page unload before it completed.

    Deliberately not a ProtocolFaultError: the script itself did not fail.
    """

    code = "cancelled"
    message = "Async script was cancelled by a page unload"


class ProtocolFaultError(WebDriverExecError):
    """Remote session reported a non-success status for a well-formed request."""

    code = "unknown error"
    message = "Remote session reported an error"
    status: int = 13

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
        *,
        status: int | None = None,
    ) -> None:
        super().__init__(message, details)
        if status is not None:
            self.status = status


class JavaScriptError(ProtocolFaultError):
    """Remote script threw (17)."""

    code = "javascript error"
    message = "An error occurred while executing user supplied JavaScript"
    status = 17


class ScriptTimeoutError(ProtocolFaultError):
    """Async script did not signal completion in time (28).

    Note: Not named TimeoutError to avoid shadowing Python's builtin.
    """

    code = "script timeout"
    message = "A script did not complete before its timeout expired"
    status = 28


class StaleElementReferenceError(ProtocolFaultError):
    """Element reference no longer attached to the DOM (10)."""

    code = "stale element reference"
    message = "Element is no longer attached to the DOM"
    status = 10


class NoSuchWindowError(ProtocolFaultError):
    """Target window was closed (23)."""

    code = "no such window"
    message = "The currently selected window has been closed"
    status = 23


class InvalidSessionError(ProtocolFaultError):
    """Session id is unknown to the remote end (6)."""

    code = "invalid session id"
    message = "Session does not exist"
    status = 6


class RemoteInvalidArgumentError(ProtocolFaultError):
    """Remote side rejected the arguments, e.g. an arity mismatch (61)."""

    code = "invalid argument"
    message = "The arguments passed to a command are invalid"
    status = 61


_FAULT_CLASSES: tuple[type[ProtocolFaultError], ...] = (
    JavaScriptError,
    ScriptTimeoutError,
    StaleElementReferenceError,
    NoSuchWindowError,
    InvalidSessionError,
    RemoteInvalidArgumentError,
)

# JSON Wire numeric status to exception class mapping
STATUS_CODE_MAP: dict[int, type[ProtocolFaultError]] = {
    cls.status: cls for cls in _FAULT_CLASSES
}

# W3C error string to exception class mapping
ERROR_CODE_MAP: dict[str, type[ProtocolFaultError]] = {
    cls.code: cls for cls in _FAULT_CLASSES
}

# W3C error string for an async script aborted by a page unload
UNLOAD_ERROR_CODE = "unload"

# Remote messages for an async script aborted by a page unload
_UNLOAD_MESSAGES = (
    "detected a page unload event",
    "document unloaded",
)

# Statuses under which remote ends report the unload as a script failure
_UNLOAD_STATUSES: frozenset[int | str] = frozenset(
    {17, 13, "javascript error", "unknown error"}
)


def is_unload_fault(status: int | str, message: str | None) -> bool:
    """Return True if a remote fault reports that the page unloaded."""
    if status == UNLOAD_ERROR_CODE:
        return True
    if status not in _UNLOAD_STATUSES:
        return False
    text = (message or "").lower()
    return any(phrase in text for phrase in _UNLOAD_MESSAGES)


def fault_for_status(
    status: int | str,
    message: str | None = None,
    details: dict[str, Any] | None = None,
) -> ProtocolFaultError:
    """Build the ProtocolFaultError subclass for a remote status.

    Args:
        status: JSON Wire numeric status or W3C error string
        message: Remote message, if any
        details: Extra remote data (stacktrace, raw error string)

    Returns:
        ProtocolFaultError: Appropriate subclass, or the base class when unmapped
    """
    if isinstance(status, int):
        error_class = STATUS_CODE_MAP.get(status, ProtocolFaultError)
        return error_class(message=message, details=details, status=status)

    error_class = ERROR_CODE_MAP.get(status, ProtocolFaultError)
    details = {"error": status, **(details or {})}
    return error_class(message=message, details=details)
