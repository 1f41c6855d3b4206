"""WebDriverClient - main entry point for webdriver-exec."""

from __future__ import annotations

from types import TracebackType

import httpx

from webdriver_exec._http import HTTPDispatcher
from webdriver_exec.codec import ValueCodec
from webdriver_exec.config import get_settings
from webdriver_exec.session import ScriptSession


class WebDriverClient:
    """Main client for a WebDriver remote end.

    Use as an async context manager to ensure proper cleanup.

    Example:
        async with WebDriverClient("http://localhost:4444/wd/hub") as client:
            session = client.session("4f0c8f5e")
            title = await session.execute("return document.title;")
    """

    def __init__(
        self,
        endpoint_url: str | None = None,
        *,
        timeout: float | None = None,
        multi_instance: bool | None = None,
        element_key: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize client.

        Args:
            endpoint_url: Remote end base URL. Falls back to WEBDRIVER_ENDPOINT_URL.
            timeout: Request timeout in seconds. Falls back to WEBDRIVER_TIMEOUT.
            multi_instance: Wrap "function (" scripts. Falls back to WEBDRIVER_MULTI_INSTANCE.
            element_key: Wire element marker. Falls back to WEBDRIVER_ELEMENT_KEY.
            transport: Optional httpx transport override

        Raises:
            ValueError: If endpoint_url not provided and not configured.
        """
        settings = get_settings()

        self._endpoint_url = endpoint_url or settings.endpoint_url
        if not self._endpoint_url:
            raise ValueError("endpoint_url required (or set WEBDRIVER_ENDPOINT_URL env var)")

        self._timeout = timeout if timeout is not None else settings.timeout
        self._multi_instance = (
            multi_instance if multi_instance is not None else settings.multi_instance
        )
        self._codec = ValueCodec(element_key or settings.element_key)
        self._transport = transport
        self._dispatcher: HTTPDispatcher | None = None

    async def __aenter__(self) -> WebDriverClient:
        """Enter async context, initializing the dispatcher."""
        self._dispatcher = HTTPDispatcher(
            self._endpoint_url,
            timeout=self._timeout,
            transport=self._transport,
        )
        await self._dispatcher.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit async context, closing the dispatcher."""
        if self._dispatcher:
            await self._dispatcher.__aexit__(exc_type, exc_val, exc_tb)
            self._dispatcher = None

    @property
    def dispatcher(self) -> HTTPDispatcher:
        """Get the request dispatcher."""
        if self._dispatcher is None:
            raise RuntimeError("WebDriverClient not initialized. Use 'async with' context.")
        return self._dispatcher

    @property
    def codec(self) -> ValueCodec:
        return self._codec

    def session(self, session_id: str) -> ScriptSession:
        """Bind script execution to an existing remote session.

        Args:
            session_id: ID of a session created elsewhere

        Returns:
            ScriptSession for the session
        """
        return ScriptSession(
            self.dispatcher,
            session_id,
            codec=self._codec,
            multi_instance=self._multi_instance,
        )
