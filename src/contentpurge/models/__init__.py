"""Data models."""

from contentpurge.models.base import PublishState, PurgeModel
from contentpurge.models.record import ContentType, Entry, Page
from contentpurge.models.summary import DeletionSummary

__all__ = [
    "PurgeModel",
    "PublishState",
    "Entry",
    "ContentType",
    "Page",
    "DeletionSummary",
]
