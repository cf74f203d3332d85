"""HTTP client with rate limiting and retry support.

Provides the async HTTP client the Contentful gateway is built on:
- Automatic rate limiting
- Retry with exponential backoff on timeouts, 5xx and 429 responses
- Bearer token authentication

Example:
    >>> from contentpurge.http import HttpClient
    >>>
    >>> async with HttpClient("https://api.contentful.com", token="...") as client:
    ...     space = await client.get_json("/spaces/abc123")
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from contentpurge.http.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

RETRYABLE_STATUS = (500, 502, 503, 504)


class HttpClientError(Exception):
    """Base exception for HTTP client errors.

    Attributes:
        status_code: Response status, None for transport failures.
        body: Response body text, if any.
    """

    def __init__(self, message: str, status_code: int | None = None, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class RateLimitError(HttpClientError):
    """Raised when rate limited by server after all retries."""

    def __init__(self, retry_after: float):
        self.retry_after = retry_after
        super().__init__(f"Rate limited, retry after {retry_after}s", status_code=429)


def _retry_after(response: httpx.Response) -> float:
    """Seconds to wait before retrying a 429 response."""
    for header in ("Retry-After", "X-Contentful-RateLimit-Reset"):
        value = response.headers.get(header)
        if value:
            try:
                return max(0.0, float(value))
            except ValueError:
                continue
    return 1.0


class HttpClient:
    """Async HTTP client with rate limiting and retry support.

    Example:
        >>> async with HttpClient(base_url, token=token, rate_limit=7.0) as client:
        ...     response = await client.get("/spaces/abc123/environments/master/entries")

    Attributes:
        rate_limit: Requests per second limit
        user_agent: User-Agent header value
        timeout: Default request timeout in seconds
        max_retries: Maximum retry attempts
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        token: str | None = None,
        rate_limit: float = 7.0,
        user_agent: str = "contentpurge/0.1",
        timeout: float = 30.0,
        max_retries: int = 3,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize HTTP client.

        Args:
            base_url: Base URL for relative requests
            token: Bearer token sent with every request
            rate_limit: Maximum requests per second
            user_agent: User-Agent header
            timeout: Default request timeout
            max_retries: Maximum retry attempts on failure
            headers: Additional default headers
            transport: Custom httpx transport (tests use httpx.MockTransport)
        """
        self._base_url = base_url
        self._token = token
        self._rate_limiter = RateLimiter(rate_limit)
        self._user_agent = user_agent
        self._timeout = timeout
        self._max_retries = max_retries
        self._extra_headers = headers or {}
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def rate_limit(self) -> float:
        """Current rate limit (requests per second)."""
        return self._rate_limiter.rate

    @property
    def user_agent(self) -> str:
        return self._user_agent

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def max_retries(self) -> int:
        return self._max_retries

    @property
    def headers(self) -> dict[str, str]:
        """Default headers for requests."""
        headers = {
            "User-Agent": self._user_agent,
            "Accept": "application/json",
            **self._extra_headers,
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=self.headers,
                timeout=httpx.Timeout(self._timeout),
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> HttpClient:
        await self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def request(
        self,
        method: str,
        url: str,
        *,
        retry: bool = True,
        **kwargs: Any,
    ) -> httpx.Response:
        """Make a rate-limited request with retries.

        Args:
            method: HTTP method
            url: URL (relative to base_url or absolute)
            retry: Whether to retry on failure
            **kwargs: Additional arguments for httpx

        Returns:
            HTTP response

        Raises:
            RateLimitError: If still rate limited after all retries
            HttpClientError: For other HTTP errors
        """
        client = await self._ensure_client()

        max_retries = self._max_retries if retry else 0
        last_error: Exception | None = None

        for attempt in range(max_retries + 1):
            await self._rate_limiter.acquire()

            try:
                response = await client.request(method, url, **kwargs)

                if response.status_code == 429:
                    retry_after = _retry_after(response)
                    if attempt < max_retries:
                        logger.debug(f"{method} {url} rate limited, waiting {retry_after:.1f}s")
                        await asyncio.sleep(retry_after)
                        continue
                    raise RateLimitError(retry_after)

                response.raise_for_status()
                return response

            except httpx.HTTPStatusError as e:
                last_error = e
                status = e.response.status_code
                if status in RETRYABLE_STATUS and attempt < max_retries:
                    await asyncio.sleep(2 ** attempt)
                    continue
                raise HttpClientError(
                    f"HTTP {status} for {method} {url}",
                    status_code=status,
                    body=e.response.text,
                ) from e

            except httpx.TimeoutException as e:
                last_error = e
                if attempt < max_retries:
                    await asyncio.sleep(2 ** attempt)
                    continue
                raise HttpClientError(f"Request timeout: {e}") from e

            except httpx.RequestError as e:
                last_error = e
                if attempt < max_retries:
                    await asyncio.sleep(2 ** attempt)
                    continue
                raise HttpClientError(f"Request failed: {e}") from e

        raise HttpClientError(f"Max retries exceeded: {last_error}")

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("DELETE", url, **kwargs)

    async def get_json(self, url: str, **kwargs: Any) -> Any:
        """Get JSON content from URL."""
        response = await self.get(url, **kwargs)
        return response.json()


__all__ = [
    "HttpClient",
    "HttpClientError",
    "RateLimitError",
]
