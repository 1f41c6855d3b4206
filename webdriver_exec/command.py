"""Execute command construction."""

from __future__ import annotations

from typing import Any, Sequence

from webdriver_exec.codec import ValueCodec, default_codec
from webdriver_exec.types import CommandRequest, ExecutionMode


def session_path(session_id: str) -> str:
    return f"/session/{session_id}"


def build_command(
    session_id: str,
    mode: ExecutionMode,
    script: str,
    args: Sequence[Any] = (),
    *,
    codec: ValueCodec | None = None,
) -> CommandRequest:
    """Build the execute request for one call.

    Args:
        session_id: Remote session identifier
        mode: Sync or async execution
        script: Normalized function-body text
        args: Native positional arguments
        codec: Value codec; defaults to the JSON Wire element key

    Returns:
        Immutable CommandRequest

    Raises:
        InvalidArgumentError: If an argument is not JSON-representable
    """
    codec = codec or default_codec
    return CommandRequest(
        path=f"{session_path(session_id)}/{ExecutionMode(mode).endpoint}",
        script=script,
        args=codec.encode_args(tuple(args)),
    )
