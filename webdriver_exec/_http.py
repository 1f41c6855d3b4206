"""HTTP request dispatcher for the remote end.

Handles connection pooling, transport error mapping, and JSON
request/response serialization.
"""

from __future__ import annotations

from types import TracebackType
from typing import Any, Protocol

import httpx
import structlog
from pydantic import ValidationError

from webdriver_exec.errors import TransportError
from webdriver_exec.types import WireResponse

logger = structlog.get_logger()


class RequestDispatcher(Protocol):
    """Sends a command payload to the remote end."""

    async def send(self, path: str, payload: dict[str, Any]) -> WireResponse | dict[str, Any]:
        """POST payload to path and return the response.

        Raises:
            TransportError: If no response could be obtained
        """
        ...


class HTTPDispatcher:
    """Async HTTP dispatcher for a WebDriver remote end.

    Wraps httpx.AsyncClient with:
    - Connection pooling
    - Mapping of network failures to TransportError
    - Request/response logging

    Error statuses are not raised here. JSON Wire and W3C both report
    command failures in the response body, which the caller interprets.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize dispatcher.

        Args:
            base_url: Remote end base URL (e.g., "http://localhost:4444/wd/hub")
            timeout: Default request timeout in seconds
            transport: Optional httpx transport override
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._log = logger.bind(component="http_dispatcher", base_url=self._base_url)

    @staticmethod
    def _parse_json_body(response: httpx.Response) -> dict[str, Any]:
        try:
            payload = response.json()
        except ValueError as e:
            raw_text = response.text or ""
            snippet_limit = 500
            raise TransportError(
                f"HTTP {response.status_code} returned non-JSON response",
                details={
                    "status_code": response.status_code,
                    "raw_response_snippet": raw_text[:snippet_limit],
                    "raw_response_truncated": len(raw_text) > snippet_limit,
                },
            ) from e
        if not isinstance(payload, dict):
            raise TransportError(
                f"HTTP {response.status_code} returned a non-object JSON body",
                details={"status_code": response.status_code},
            )
        return payload

    async def __aenter__(self) -> HTTPDispatcher:
        """Enter async context, creating HTTP client."""
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=httpx.Timeout(self._timeout),
            headers={"Accept": "application/json"},
            transport=self._transport,
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit async context, closing HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get the underlying httpx client."""
        if self._client is None:
            raise RuntimeError("HTTPDispatcher not initialized. Use 'async with' context.")
        return self._client

    async def send(
        self,
        path: str,
        payload: dict[str, Any],
        *,
        timeout: float | None = None,
    ) -> WireResponse:
        """POST a JSON payload and return the parsed response.

        Args:
            path: Command path (e.g., "/session/abc/execute")
            payload: JSON body
            timeout: Override default timeout for this request

        Returns:
            WireResponse with the body fields and the HTTP status, whatever
            that status is

        Raises:
            TransportError: On network failure, timeout, or a malformed body
        """
        self._log.debug("http.request", path=path)
        try:
            response = await self.client.post(
                path,
                json=payload,
                timeout=timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT,
            )
        except httpx.TimeoutException as e:
            self._log.warning("http.timeout", path=path)
            raise TransportError(
                f"Request timed out: {path}",
                details={"path": path, "timeout": True},
            ) from e
        except httpx.RequestError as e:
            self._log.warning("http.request_error", path=path, error=str(e))
            raise TransportError(
                f"Request failed: {e}",
                details={"path": path},
            ) from e

        self._log.debug("http.response", path=path, status_code=response.status_code)
        body = self._parse_json_body(response)
        try:
            wire = WireResponse.model_validate(body)
        except ValidationError as e:
            raise TransportError(
                f"HTTP {response.status_code} returned a malformed response body",
                details={
                    "status_code": response.status_code,
                    "errors": e.errors(include_url=False),
                },
            ) from e
        return wire.model_copy(update={"http_status": response.status_code})
