"""Type definitions for script execution.

Pydantic models for the wire request/response and the native handles.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# JSON Wire Protocol WebElement marker
ELEMENT_KEY = "ELEMENT"

# W3C WebDriver element identifier
W3C_ELEMENT_KEY = "element-6066-11e4-a52e-4f735466cecf"


class ExecutionMode(str, Enum):
    """Execution mode enum."""

    SYNC = "sync"  # Script result is its return value
    ASYNC = "async"  # Script signals completion through a trailing callback

    @property
    def endpoint(self) -> str:
        """Path suffix of the execute command for this mode."""
        return "execute_async" if self is ExecutionMode.ASYNC else "execute"


class ElementReference(BaseModel):
    """Opaque handle to a remote DOM element.

    Equality and hashing follow the identifier, so a reference decoded from
    a response compares equal to the one that was sent.
    """

    model_config = ConfigDict(frozen=True)

    id: str

    def __repr__(self) -> str:
        return f"ElementReference({self.id!r})"


class JSFunction(BaseModel):
    """Source of a complete JavaScript function expression.

    Stands in for a callable script: it is always sent wrapped so the remote
    end invokes it with the caller's arguments.
    """

    model_config = ConfigDict(frozen=True)

    source: str

    def __str__(self) -> str:
        return self.source


class CommandRequest(BaseModel):
    """Execute command ready for dispatch.

    Attributes:
        path: Session-relative command path
        script: Normalized script body
        args: Encoded wire arguments, in positional order
    """

    model_config = ConfigDict(frozen=True)

    path: str
    script: str
    args: tuple[Any, ...] = ()

    def payload(self) -> dict[str, Any]:
        """Wire body for the dispatcher."""
        return {"script": self.script, "args": list(self.args)}


class WireResponse(BaseModel):
    """Raw response body.

    JSON Wire responses carry a numeric ``status``; W3C responses omit it and
    report failures as ``{"value": {"error": ..., "message": ...}}`` with a
    4xx/5xx HTTP status. ``http_status`` is filled in by the dispatcher and is
    not part of the body.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    session_id: str | None = Field(default=None, alias="sessionId")
    status: int | None = None
    value: Any = None
    http_status: int | None = Field(default=None, exclude=True)

    @property
    def w3c_error(self) -> str | None:
        """W3C error string if the value is an error object."""
        value = self.value
        if isinstance(value, dict) and isinstance(value.get("error"), str) and "message" in value:
            return value["error"]
        return None

    @property
    def is_success(self) -> bool:
        if self.status is not None:
            return self.status == 0
        if self.http_status is not None and self.http_status < 400:
            # A script result shaped like an error object is still a result
            return True
        return self.w3c_error is None
