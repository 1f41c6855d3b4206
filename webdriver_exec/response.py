"""Response interpretation.

Maps a raw response body to a decoded result or a classified error:

- success status: decode ``value`` and return it
- remote fault during an async script caused by a page unload: CancellationError
- any other remote fault: ProtocolFaultError (or a subclass)

Transport failures never reach this module; the dispatcher raises them.
"""

from __future__ import annotations

from typing import Any

import structlog
from pydantic import ValidationError

from webdriver_exec.codec import ValueCodec, default_codec
from webdriver_exec.errors import (
    CancellationError,
    TransportError,
    fault_for_status,
    is_unload_fault,
)
from webdriver_exec.types import ExecutionMode, WireResponse

logger = structlog.get_logger()


def _fault_fields(response: WireResponse) -> tuple[int | str, str | None, dict[str, Any]]:
    value = response.value
    details: dict[str, Any] = {}
    message: str | None = None

    if isinstance(value, dict):
        message = value.get("message")
        for key in ("stacktrace", "screen", "data", "class"):
            if key in value:
                details[key] = value[key]
    elif isinstance(value, str):
        message = value

    if response.status is not None:
        return response.status, message, details
    return response.w3c_error or "unknown error", message, details


def interpret(
    body: WireResponse | dict[str, Any],
    *,
    mode: ExecutionMode = ExecutionMode.SYNC,
    codec: ValueCodec | None = None,
) -> Any:
    """Decode a raw execute response.

    Args:
        body: Dispatcher response, or a parsed JSON response body
        mode: Execution mode of the request that produced it
        codec: Value codec; defaults to the JSON Wire element key

    Returns:
        Decoded script result

    Raises:
        CancellationError: Async script invalidated by a page unload
        ProtocolFaultError: Remote session reported a fault
        TransportError: Body is not a response object
    """
    codec = codec or default_codec
    if isinstance(body, WireResponse):
        response = body
    else:
        try:
            response = WireResponse.model_validate(body)
        except ValidationError as e:
            raise TransportError(
                "Malformed response body",
                details={"errors": e.errors(include_url=False)},
            ) from e

    if response.is_success:
        return codec.decode(response.value)

    status, message, details = _fault_fields(response)

    if mode is ExecutionMode.ASYNC and is_unload_fault(status, message):
        logger.info("script.cancelled", status=status, message=message)
        raise CancellationError(message, details={"status": status, **details})

    error = fault_for_status(status, message, details)
    logger.info("script.faulted", status=status, code=error.code, message=error.message)
    raise error
