"""Record gateway protocol.

Defines the interface the deletion engines use to reach the content backend.
Connection handling, authentication and HTTP retries live behind it.

Example:
    >>> from contentpurge.protocols.gateway import RecordGateway
    >>> hasattr(RecordGateway, "list_entries")
    True
    >>> hasattr(RecordGateway, "delete_content_type")
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from contentpurge.models import ContentType, Entry, Page


@runtime_checkable
class RecordGateway(Protocol):
    """Access to one space/environment of the content backend.

    See Also:
        contentpurge.gateway.contentful.ContentfulGateway: HTTP implementation
        contentpurge.gateway.memory.MemoryGateway: In-memory implementation
    """

    async def get_space_name(self) -> str:
        """Human readable name of the target space."""
        ...

    # --- Entries ---

    async def list_entries(
        self,
        content_type: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> Page[Entry]:
        """List entries, optionally scoped to one content type.

        ``limit=0`` returns no items, only the total.
        """
        ...

    async def get_entry(self, entry_id: str) -> Entry:
        """Fetch one entry. Raises NotFoundError if it does not exist."""
        ...

    async def unpublish_entry(self, entry: Entry) -> Entry:
        """Unpublish an entry, returning its updated state."""
        ...

    async def delete_entry(self, entry: Entry) -> None:
        """Delete an unpublished entry."""
        ...

    # --- Content types ---

    async def list_content_types(self, skip: int = 0, limit: int = 100) -> Page[ContentType]:
        """List content types."""
        ...

    async def unpublish_content_type(self, content_type: ContentType) -> ContentType:
        """Deactivate a content type, returning its updated state."""
        ...

    async def delete_content_type(self, content_type: ContentType) -> None:
        """Delete a deactivated content type."""
        ...

    # --- Lifecycle ---

    async def close(self) -> None:
        """Release connections."""
        ...
