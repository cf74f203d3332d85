"""Record gateway implementations."""

from contentpurge.gateway.contentful import ContentfulGateway
from contentpurge.gateway.memory import MemoryGateway

__all__ = [
    "ContentfulGateway",
    "MemoryGateway",
]
