"""Base models and shared types.

Example:
    >>> from contentpurge.models.base import PublishState
    >>> PublishState.CHANGED.value
    'changed'
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class PublishState(str, Enum):
    """Publish state of an entry or content type.

    Derived from the backend's version counters: a publish bumps ``version``
    by one on top of ``publishedVersion``, every later edit bumps it again.

    Example:
        >>> list(PublishState)
        [<PublishState.DRAFT: 'draft'>, <PublishState.PUBLISHED: 'published'>, <PublishState.CHANGED: 'changed'>]
    """

    DRAFT = "draft"  # Never published, or archived
    PUBLISHED = "published"  # Live and unmodified since publish
    CHANGED = "changed"  # Live, with unpublished edits on top

    @classmethod
    def from_versions(cls, version: int, published_version: int | None) -> PublishState:
        """Classify a record from its version counters.

        Example:
            >>> PublishState.from_versions(3, None)
            <PublishState.DRAFT: 'draft'>
            >>> PublishState.from_versions(4, 3)
            <PublishState.PUBLISHED: 'published'>
            >>> PublishState.from_versions(6, 3)
            <PublishState.CHANGED: 'changed'>
        """
        if published_version is None:
            return cls.DRAFT
        if version == published_version + 1:
            return cls.PUBLISHED
        return cls.CHANGED


class PurgeModel(BaseModel):
    """Base model with standard configuration.

    Backend payloads carry many keys we do not model, so extra input is
    ignored rather than rejected.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )
