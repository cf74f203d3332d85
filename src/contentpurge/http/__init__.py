"""contentpurge HTTP utilities.

Provides rate limiting and retry logic for the Content Management API.

Example:
    >>> from contentpurge.http import RateLimiter, HttpClient
    >>>
    >>> limiter = RateLimiter(rate=7.0)  # 7 requests/second
    >>> await limiter.acquire()
    >>>
    >>> async with HttpClient("https://api.contentful.com", token="...") as client:
    ...     response = await client.get("/spaces/abc123")
"""

from contentpurge.http.client import HttpClient, HttpClientError, RateLimitError
from contentpurge.http.rate_limiter import RateLimiter

__all__ = [
    "HttpClient",
    "HttpClientError",
    "RateLimitError",
    "RateLimiter",
]
