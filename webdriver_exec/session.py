"""Script execution against one remote session."""

from __future__ import annotations

from typing import Any

import structlog

from webdriver_exec._http import RequestDispatcher
from webdriver_exec.codec import ValueCodec, default_codec
from webdriver_exec.command import build_command, session_path
from webdriver_exec.errors import InvalidArgumentError
from webdriver_exec.response import interpret
from webdriver_exec.script import normalize
from webdriver_exec.types import ExecutionMode, JSFunction

logger = structlog.get_logger()


class ScriptSession:
    """Executes JavaScript in the currently selected frame of a session.

    Arguments may be any JSON primitive, list or dict. ElementReference
    handles are sent as WebElement objects and become DOM elements in the
    page; elements in the script result come back as ElementReference.

    Example:
        await session.set_async_script_timeout(5000)
        total = await session.execute_async(
            js_function("function (a, b, c, d, done) { done(a + b + c + d); }"),
            1, 2, 3, 4,
        )
        # total == 10
    """

    def __init__(
        self,
        dispatcher: RequestDispatcher,
        session_id: str,
        *,
        codec: ValueCodec | None = None,
        multi_instance: bool = False,
    ) -> None:
        """Initialize session.

        Args:
            dispatcher: Transport used to send commands
            session_id: Remote session identifier
            codec: Value codec; defaults to the JSON Wire element key
            multi_instance: Wrap "function (" source text like a JSFunction
        """
        if not session_id:
            raise ValueError("session_id required")
        self._dispatcher = dispatcher
        self._session_id = session_id
        self._codec = codec or default_codec
        self._multi_instance = multi_instance
        self._log = logger.bind(session_id=session_id)

    @property
    def id(self) -> str:
        """Remote session ID."""
        return self._session_id

    async def execute(self, script: str | JSFunction, *args: Any) -> Any:
        """Run a synchronous script and return its result.

        Args:
            script: Function body, or a JSFunction invoked with args
            *args: Script arguments, bound positionally to ``arguments``

        Returns:
            The script's return value, decoded

        Raises:
            InvalidArgumentError: Bad script or argument; nothing was sent
            ProtocolFaultError: Remote script threw or the command failed
            TransportError: The remote end could not be reached
        """
        return await self._run(ExecutionMode.SYNC, script, args)

    async def execute_async(self, script: str | JSFunction, *args: Any) -> Any:
        """Run an asynchronous script and return the value it signals.

        The remote end appends a completion callback as the final argument;
        the script must call it to finish. Async scripts may not span page
        loads.

        Raises:
            InvalidArgumentError: Bad script or argument; nothing was sent
            CancellationError: The page unloaded before the callback fired
            ScriptTimeoutError: The callback was not called in time
            ProtocolFaultError: Remote script threw or the command failed
            TransportError: The remote end could not be reached
        """
        return await self._run(ExecutionMode.ASYNC, script, args)

    async def _run(
        self,
        mode: ExecutionMode,
        script: str | JSFunction,
        args: tuple[Any, ...],
    ) -> Any:
        source = normalize(script, multi_instance=self._multi_instance)
        request = build_command(self._session_id, mode, source, args, codec=self._codec)

        self._log.debug("script.dispatch", mode=mode.value, path=request.path, argc=len(args))
        body = await self._dispatcher.send(request.path, request.payload())
        result = interpret(body, mode=mode, codec=self._codec)
        self._log.debug("script.completed", mode=mode.value)
        return result

    async def set_async_script_timeout(self, ms: int) -> None:
        """Set how long execute_async waits for the completion callback.

        Args:
            ms: Timeout in milliseconds
        """
        await self._set_timeout("/timeouts/async_script", {"ms": self._check_ms(ms)})

    async def set_script_timeout(self, ms: int) -> None:
        """Set the script timeout through the generic timeouts command."""
        await self._set_timeout("/timeouts", {"type": "script", "ms": self._check_ms(ms)})

    @staticmethod
    def _check_ms(ms: int) -> int:
        if isinstance(ms, bool) or not isinstance(ms, int) or ms < 0:
            raise InvalidArgumentError(
                f"timeout must be a non-negative integer of milliseconds, got {ms!r}"
            )
        return ms

    async def _set_timeout(self, suffix: str, payload: dict[str, Any]) -> None:
        body = await self._dispatcher.send(f"{session_path(self._session_id)}{suffix}", payload)
        interpret(body, codec=self._codec)
        self._log.debug("session.timeout_set", **payload)
