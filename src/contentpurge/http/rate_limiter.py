"""Rate limiter for controlling request frequency.

The Content Management API enforces a per-second request quota per token.
All requests of a run share one limiter, so the concurrent deletions of a
page are spread out instead of tripping 429 responses.

Example:
    >>> from contentpurge.http import RateLimiter
    >>>
    >>> limiter = RateLimiter(rate=7.0)  # 7 requests per second
    >>>
    >>> # In async code
    >>> await limiter.acquire()  # Waits if needed
    >>> # ... make request ...
"""

from __future__ import annotations

import asyncio
import time


class RateLimiter:
    """Minimum-interval rate limiter.

    Requests are serialized through a lock and spaced at least
    ``1 / rate`` seconds apart.

    Attributes:
        rate: Maximum requests per second
        min_interval: Minimum interval between requests
    """

    def __init__(self, rate: float = 7.0):
        """Initialize rate limiter.

        Args:
            rate: Maximum requests per second (default: 7)

        Raises:
            ValueError: If rate is not positive
        """
        if rate <= 0:
            raise ValueError(f"rate must be positive, got {rate}")
        self.rate = rate
        self.min_interval = 1.0 / rate
        self._last_request: float = 0.0
        self._lock = asyncio.Lock()

    async def acquire(self) -> float:
        """Wait until a request can be made.

        Returns:
            Time waited in seconds
        """
        async with self._lock:
            now = time.monotonic()
            elapsed = now - self._last_request
            wait_time = 0.0

            if elapsed < self.min_interval:
                wait_time = self.min_interval - elapsed
                await asyncio.sleep(wait_time)

            self._last_request = time.monotonic()
            return wait_time

    def reset(self) -> None:
        """Reset the rate limiter state."""
        self._last_request = 0.0


__all__ = ["RateLimiter"]
