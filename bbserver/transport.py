"""
HTTP Transport for bbserver.

Builds authenticated Bitbucket Server requests, sends each one exactly once,
and classifies the response status.
"""

import json
import time
from typing import Any

import httpx

from bbserver.exceptions import ConfigurationError, TransportError, error_for_status
from bbserver.logging import log_http_request, log_http_response

SUCCESS_STATUS_CODES = frozenset({200, 201, 204})


def normalize_base_url(base_url: str) -> str:
    """
    Validate a base URL and strip trailing slashes.

    Raises:
        ConfigurationError: If the URL is malformed or has no http/https scheme
    """
    try:
        parsed = httpx.URL(base_url)
    except httpx.InvalidURL as e:
        raise ConfigurationError(f"parsing {base_url}: {e}") from e
    if parsed.scheme not in ("http", "https"):
        raise ConfigurationError(
            f"must have 'http://' or 'https://' in base url {base_url!r}"
        )
    return str(parsed).rstrip("/")


def build_headers(token: str, has_body: bool) -> dict[str, str]:
    """Headers sent with every request."""
    headers = {"Authorization": f"Bearer {token}"}
    if has_body:
        headers["Content-Type"] = "application/json"
    # Disables the XSRF check on write endpoints
    headers["X-Atlassian-Token"] = "no-check"
    return headers


def encode_body(body: dict[str, Any] | None) -> bytes | None:
    if body is None:
        return None
    return json.dumps(body).encode("utf-8")


def classify_response(
    method: str,
    path: str,
    url: str,
    response: httpx.Response,
    elapsed_ms: float | None = None,
) -> bytes:
    """
    Return the body of a successful response or raise for any other status.

    Raises:
        HTTPStatusError: On any status other than 200, 201 or 204
    """
    log_http_response(response.status_code, url, response.content, elapsed_ms)

    if response.status_code not in SUCCESS_STATUS_CODES:
        raise error_for_status(method, path, response.status_code, response.text)
    return response.content


class HTTPTransport:
    """
    HTTP transport layer for the Bitbucket Server REST API.

    Handles:
    - Bearer token authentication and the anti-XSRF header
    - JSON request bodies
    - Status classification into typed exceptions

    There is no retry: one call is one round-trip.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 30.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            base_url: Server URL without API version (e.g., "https://corp.com:7990")
            token: Personal access token
            timeout: Request timeout in seconds, used only when http_client is None
            http_client: Preconfigured httpx client; one is created when omitted

        Raises:
            ConfigurationError: If base_url has no http/https scheme
        """
        self.base_url = normalize_base_url(base_url)
        self.token = token
        self.timeout = timeout

        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else httpx.Client(timeout=timeout)

    def close(self) -> None:
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: dict[str, Any] | None = None,
    ) -> bytes:
        """
        Send one authenticated request.

        Args:
            method: HTTP method
            path: API path below the base URL (e.g., "/rest/api/1.0/...")
            params: Query parameters
            body: JSON body, if any

        Returns:
            Raw response body (empty for 204)

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
            response = self._client.send(request)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise TransportError(method, path, str(e)) from e

        elapsed_ms = (time.perf_counter() - started) * 1000
        return classify_response(method, path, url, response, elapsed_ms)
