"""Core configuration and errors.

The orchestrator lives in :mod:`contentpurge.core.purge`; it is not imported
here because it depends on the engines, which depend on this package.
"""

from contentpurge.core.config import Settings, get_settings
from contentpurge.core.exceptions import (
    ConfigurationError,
    ConflictError,
    ContentPurgeError,
    GatewayError,
    NotFoundError,
)

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    # Errors
    "ContentPurgeError",
    "ConfigurationError",
    "GatewayError",
    "NotFoundError",
    "ConflictError",
]
