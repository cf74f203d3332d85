"""Batch deletion engines."""

from contentpurge.engine.entries import EntryDeletionEngine
from contentpurge.engine.pagination import PageCursor
from contentpurge.engine.policy import PublishPolicy
from contentpurge.engine.schemas import SchemaDeletionEngine

__all__ = [
    "EntryDeletionEngine",
    "SchemaDeletionEngine",
    "PageCursor",
    "PublishPolicy",
]
