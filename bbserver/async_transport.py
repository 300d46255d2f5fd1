"""
Async HTTP Transport for bbserver.

Same request construction and status classification as HTTPTransport, on top
of httpx's async client.
"""

import time
from typing import Any

import httpx

from bbserver.exceptions import TransportError
from bbserver.logging import log_http_request
from bbserver.transport import build_headers, classify_response, encode_body, normalize_base_url


class AsyncHTTPTransport:
    """
    Async HTTP transport layer for the Bitbucket Server REST API.

    There is no retry: one call is one round-trip.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize async HTTP transport.

        Args:
            base_url: Server URL without API version (e.g., "https://corp.com:7990")
            token: Personal access token
            timeout: Request timeout in seconds, used only when http_client is None
            http_client: Preconfigured httpx async client; one is created when omitted

        Raises:
            ConfigurationError: If base_url has no http/https scheme
        """
        self.base_url = normalize_base_url(base_url)
        self.token = token
        self.timeout = timeout

        self._owns_client = http_client is None
        self._client = (
            http_client if http_client is not None else httpx.AsyncClient(timeout=timeout)
        )

    async def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> bytes:
        """
        Send one authenticated request.

        Raises:
            TransportError: If the request could not be built or sent
            HTTPStatusError: On an unexpected status code
        """
        url = self.base_url + path
        headers = build_headers(self.token, body is not None)
        log_http_request(method, url, headers, body)

        try:
            request = self._client.build_request(
                method, url, params=params, content=encode_body(body), headers=headers
            )
            started = time.perf_counter()
            response = await self._client.send(request)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise TransportError(method, path, str(e)) from e

        elapsed_ms = (time.perf_counter() - started) * 1000
        return classify_response(method, path, url, response, elapsed_ms)
