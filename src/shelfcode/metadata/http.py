# ABOUTME: HTTP client abstraction for book lookup and genre advisor API calls.
# ABOUTME: Provides rate limiting, JSON GET/POST, and injectable transport for testing.

import logging
import time
from typing import Any, Protocol, runtime_checkable

import httpx

logger = logging.getLogger(__name__)

USER_AGENT = "shelfcode/0.1.0"


class MetadataFetchError(Exception):
    """Raised when an HTTP request to an external API fails."""


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for JSON HTTP operations against external APIs."""

    def get(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]: ...

    def post(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]: ...


class ShelfcodeHttpClient:
    """HTTP client with rate limiting for external API calls.

    Wraps httpx.Client with a configurable minimum interval between
    requests. Requests are made once; failures surface as MetadataFetchError.
    """

    def __init__(
        self,
        *,
        min_request_interval: float = 0.1,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": USER_AGENT},
            "timeout": timeout,
            "follow_redirects": True,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)
        self._min_interval = min_request_interval
        self._last_request_time: float = 0.0

    def get(self, url: str, params: dict[str, str] | None = None) -> dict[str, Any]:
        """Send a GET request and return the parsed JSON body.

        Raises:
            MetadataFetchError: On transport errors, non-200 responses, or invalid JSON.
        """
        self._rate_limit()
        try:
            response = self._client.get(url, params=params)
        except httpx.HTTPError as exc:
            raise MetadataFetchError(f"Request failed: {url}: {exc}") from exc
        return self._parse(url, response)

    def post(
        self,
        url: str,
        payload: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """Send a JSON POST request and return the parsed JSON body.

        Raises:
            MetadataFetchError: On transport errors, non-200 responses, or invalid JSON.
        """
        self._rate_limit()
        try:
            response = self._client.post(url, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            raise MetadataFetchError(f"Request failed: {url}: {exc}") from exc
        return self._parse(url, response)

    def close(self) -> None:
        self._client.close()

    @staticmethod
    def _parse(url: str, response: httpx.Response) -> dict[str, Any]:
        if response.status_code != 200:
            logger.debug("HTTP %d from %s", response.status_code, url)
            raise MetadataFetchError(f"HTTP {response.status_code} from {url}")
        try:
            return response.json()
        except ValueError as exc:
            raise MetadataFetchError(f"Invalid JSON from {url}") from exc

    def _rate_limit(self) -> None:
        """Sleep if needed to maintain minimum interval between requests."""
        if self._min_interval <= 0:
            return
        now = time.monotonic()
        elapsed = now - self._last_request_time
        if elapsed < self._min_interval and self._last_request_time > 0:
            time.sleep(self._min_interval - elapsed)
        self._last_request_time = time.monotonic()
