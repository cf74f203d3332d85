"""Custom exceptions.

contentpurge uses a small hierarchy of exceptions so callers can tell
configuration problems (fatal, raised before anything is deleted) apart from
backend failures (isolated per record by the deletion engines).

Example:
    >>> from contentpurge.core.exceptions import (
    ...     ContentPurgeError, GatewayError, NotFoundError,
    ... )
    >>> isinstance(NotFoundError("entry abc"), GatewayError)
    True
    >>> try:
    ...     raise NotFoundError("entry abc")
    ... except ContentPurgeError as e:
    ...     print(f"Caught: {type(e).__name__}")
    Caught: NotFoundError
"""

from __future__ import annotations


class ContentPurgeError(Exception):
    """Base exception for contentpurge.

    Example:
        >>> from contentpurge.core.exceptions import ContentPurgeError
        >>> e = ContentPurgeError("something went wrong")
        >>> str(e)
        'something went wrong'
    """


class ConfigurationError(ContentPurgeError):
    """Run configuration is invalid (unreadable list file, bad option).

    Example:
        >>> from contentpurge.core.exceptions import ConfigurationError
        >>> raise ConfigurationError("ignore list not readable")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ConfigurationError: ignore list not readable
    """


class GatewayError(ContentPurgeError):
    """A call against the content backend failed.

    Attributes:
        status_code: HTTP status returned by the backend, if any.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(GatewayError):
    """Requested entry or content type does not exist (anymore)."""


class ConflictError(GatewayError):
    """Backend rejected a write, usually a stale version or a live reference."""
