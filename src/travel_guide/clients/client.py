"""Base client for network requests."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from time import perf_counter, sleep
from typing import Any

import httpx

from .exceptions import (
    APIError,
    ClientError,
    ConnectionError,
    DecodeError,
    NotFoundError,
    RateLimitError,
)
from .tracker import HttpRequestRecord, RequestTracker

logger = logging.getLogger(__name__)


class Client(ABC):
    """Base class for network clients.

    Provides lazy-initialized httpx.Client with context manager support,
    configurable timeout, retries, and headers via dict config. Every
    logical request (after retries) is recorded once in the request tracker,
    when one is given.

    Config keys:
        base_url (required): Base URL for all requests
        timeout: Request timeout in seconds (default: 30)
        retry_attempts: Number of attempts for transient failures (default: 3)
        retry_delay: Delay between retries in seconds (default: 1)
        headers: Additional headers to include in requests
    """

    def __init__(self, config: dict, tracker: RequestTracker | None = None):
        if not config.get("base_url"):
            raise ValueError("config must include 'base_url'")

        self._config = config
        self._client: httpx.Client | None = None
        self.tracker = tracker

    @property
    def base_url(self) -> str:
        return str(self._config["base_url"]).rstrip("/")

    @property
    def timeout(self) -> float:
        return float(self._config.get("timeout", 30))

    @property
    def retry_attempts(self) -> int:
        return max(1, int(self._config.get("retry_attempts", 3)))

    @property
    def retry_delay(self) -> float:
        return float(self._config.get("retry_delay", 1))

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._config.get("headers", {}))

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialized httpx client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.timeout,
                headers=self.headers,
            )
        return self._client

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def build_url(self, path: str, params: dict[str, Any] | None = None) -> httpx.URL:
        """Absolute request URL for a path and query parameters."""
        return httpx.URL(f"{self.base_url}{path}", params=params or {})

    def _handle_response(self, response: httpx.Response) -> httpx.Response:
        """Map HTTP errors to exceptions.

        Args:
            response: The HTTP response to check

        Returns:
            The response if successful

        Raises:
            NotFoundError: For 404 responses
            RateLimitError: For 429 responses
            APIError: For other non-2xx responses
        """
        if response.is_success:
            return response

        status_code = response.status_code
        message = f"HTTP {status_code} {response.reason_phrase}".rstrip()

        if status_code == 404:
            raise NotFoundError(message)
        elif status_code == 429:
            raise RateLimitError(message)
        else:
            raise APIError(message, status_code=status_code)

    @contextmanager
    def _track(self, method: str, url: httpx.URL) -> Iterator[HttpRequestRecord]:
        """Time a request and record it in the tracker, successful or not."""
        record = HttpRequestRecord(url=str(url), method=method)
        started = perf_counter()
        try:
            yield record
        except ClientError as e:
            record.error = e.message
            raise
        finally:
            record.duration = (perf_counter() - started) * 1000
            if self.tracker is not None:
                self.tracker.record(record)

    def _send(self, method: str, url: httpx.URL, **kwargs) -> httpx.Response:
        """Send a request, retrying connection failures and timeouts.

        Raises:
            ConnectionError: If all retry attempts fail due to network issues
        """
        last_exception: Exception | None = None

        for attempt in range(self.retry_attempts):
            try:
                return self.client.request(method, url, **kwargs)
            except httpx.ConnectError as e:
                last_exception = e
                logger.warning(
                    f"Connection error (attempt {attempt + 1}/{self.retry_attempts}): {e}"
                )
            except httpx.TimeoutException as e:
                last_exception = e
                logger.warning(
                    f"Timeout (attempt {attempt + 1}/{self.retry_attempts}): {e}"
                )
            except httpx.TransportError as e:
                raise ConnectionError(f"Transport error: {e}") from e
            if attempt < self.retry_attempts - 1:
                sleep(self.retry_delay)

        msg = f"Connection failed after {self.retry_attempts} attempts"
        raise ConnectionError(msg) from last_exception

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        parse_json: bool = False,
        **kwargs,
    ) -> Any:
        """Make a tracked request.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: URL path (appended to base_url)
            params: Query parameters
            parse_json: Return the decoded JSON body instead of the response
            **kwargs: Additional arguments passed to httpx.Client.request

        Returns:
            The HTTP response, or the decoded body when parse_json is set

        Raises:
            ConnectionError: If all retry attempts fail due to network issues
            APIError: If the API returns a non-2xx response
            DecodeError: If parse_json is set and the body is not JSON
        """
        url = self.build_url(path, params)

        with self._track(method, url) as record:
            response = self._send(method, url, **kwargs)
            record.status = response.status_code
            self._handle_response(response)

            if not parse_json:
                return response
            try:
                return response.json()
            except ValueError as e:
                raise DecodeError(f"Invalid JSON in response from {path}") from e

    def get(self, path: str, params: dict[str, Any] | None = None, **kwargs) -> httpx.Response:
        """Convenience method for GET requests."""
        return self._request("GET", path, params=params, **kwargs)

    def get_json(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """GET a path and return the decoded JSON body."""
        return self._request("GET", path, params=params, parse_json=True)

    @abstractmethod
    def fetch(self, *args, **kwargs) -> Any:
        """Fetch data from the API. Must be implemented by subclasses."""
        pass
