"""Entry and content type models.

Both are thin views over the Content Management API payloads: only the
system metadata the deletion engines need is lifted out of ``sys``; entry
fields are kept as the raw localized mapping.

Example:
    >>> from contentpurge.models.record import Entry
    >>> entry = Entry.from_api({
    ...     "sys": {
    ...         "id": "ep-1",
    ...         "version": 4,
    ...         "publishedVersion": 3,
    ...         "contentType": {"sys": {"id": "episode"}},
    ...     },
    ...     "fields": {"title": {"en-US": "Pilot"}},
    ... })
    >>> entry.id, entry.content_type_id, entry.publish_state.value
    ('ep-1', 'episode', 'published')
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import Field

from contentpurge.models.base import PublishState, PurgeModel

T = TypeVar("T")


class Entry(PurgeModel):
    """One content record.

    Attributes:
        id: Backend identifier.
        content_type_id: Identifier of the owning content type.
        version: Current version counter.
        published_version: Version at last publish, None if never published.
        fields: Localized field values, ``{field: {locale: value}}``.
    """

    id: str = Field(..., min_length=1)
    content_type_id: str = ""
    version: int = Field(default=1, ge=0)
    published_version: int | None = None
    fields: dict[str, Any] = Field(default_factory=dict)

    @property
    def publish_state(self) -> PublishState:
        return PublishState.from_versions(self.version, self.published_version)

    @property
    def is_published(self) -> bool:
        """True for both published and changed entries."""
        return self.published_version is not None

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> Entry:
        """Build an entry from a Content Management API item."""
        sys = payload.get("sys") or {}
        content_type = ((sys.get("contentType") or {}).get("sys") or {}).get("id", "")
        return cls(
            id=sys.get("id", ""),
            content_type_id=content_type,
            version=sys.get("version", 1),
            published_version=sys.get("publishedVersion"),
            fields=payload.get("fields") or {},
        )


class ContentType(PurgeModel):
    """A content type (schema) definition.

    Content types only know draft and published; an edited content type
    still has to be unpublished before it can be deleted.

    Example:
        >>> ct = ContentType(id="episode", version=2, published_version=1)
        >>> ct.is_published
        True
    """

    id: str = Field(..., min_length=1)
    name: str = ""
    version: int = Field(default=1, ge=0)
    published_version: int | None = None

    @property
    def publish_state(self) -> PublishState:
        if self.published_version is None:
            return PublishState.DRAFT
        return PublishState.PUBLISHED

    @property
    def is_published(self) -> bool:
        return self.published_version is not None

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> ContentType:
        """Build a content type from a Content Management API item."""
        sys = payload.get("sys") or {}
        return cls(
            id=sys.get("id", ""),
            name=payload.get("name") or "",
            version=sys.get("version", 1),
            published_version=sys.get("publishedVersion"),
        )


class Page(PurgeModel, Generic[T]):
    """One page of a collection listing.

    ``total`` is the size of the whole collection at the time the page was
    served, not the number of items on this page.

    Example:
        >>> page = Page[str](total=12, skip=5, limit=5, items=["a", "b"])
        >>> page.total, len(page.items)
        (12, 2)
    """

    total: int = Field(default=0, ge=0)
    skip: int = Field(default=0, ge=0)
    limit: int = Field(default=0, ge=0)
    items: list[T] = Field(default_factory=list)
