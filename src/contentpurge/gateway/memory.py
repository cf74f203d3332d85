"""In-memory record gateway.

Provides a complete in-memory implementation of RecordGateway, useful for
testing the deletion engines and for dry rehearsals of a purge.

Listing order is insertion order and totals are live, so deletions shift
later records towards the front exactly like the real backend does.

Example:
    >>> from contentpurge.gateway.memory import MemoryGateway
    >>> gateway = MemoryGateway()
    >>> hasattr(gateway, "list_entries")
    True
"""

from __future__ import annotations

from collections.abc import Iterable

from contentpurge.core.exceptions import ConflictError, GatewayError, NotFoundError
from contentpurge.models import ContentType, Entry, Page


class MemoryGateway:
    """In-memory backend using dictionaries.

    Args:
        entries: Initial entries, in listing order.
        content_types: Initial content types, in listing order.
        space_name: Name returned by get_space_name().

    Attributes:
        deleted_entries: Ids of deleted entries, in deletion order.
        unpublished_entries: Ids of unpublished entries, in call order.
        deleted_content_types: Ids of deleted content types, in deletion order.
        failures: Entry or content type id -> exception raised by every
            unpublish/delete call for that id.
    """

    def __init__(
        self,
        entries: Iterable[Entry] = (),
        content_types: Iterable[ContentType] = (),
        space_name: str = "memory",
    ) -> None:
        self._entries: dict[str, Entry] = {e.id: e for e in entries}
        self._content_types: dict[str, ContentType] = {ct.id: ct for ct in content_types}
        self._space_name = space_name
        self.deleted_entries: list[str] = []
        self.unpublished_entries: list[str] = []
        self.deleted_content_types: list[str] = []
        self.failures: dict[str, Exception] = {}
        self.list_calls = 0
        self._closed = False

    @property
    def entry_count(self) -> int:
        return len(self._entries)

    @property
    def content_type_count(self) -> int:
        return len(self._content_types)

    def add_entry(self, entry: Entry) -> None:
        self._entries[entry.id] = entry

    def add_content_type(self, content_type: ContentType) -> None:
        self._content_types[content_type.id] = content_type

    async def get_space_name(self) -> str:
        return self._space_name

    # --- Entries ---

    async def list_entries(
        self,
        content_type: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> Page[Entry]:
        self.list_calls += 1
        matching = [
            e for e in self._entries.values()
            if content_type is None or e.content_type_id == content_type
        ]
        return Page[Entry](
            total=len(matching),
            skip=skip,
            limit=limit,
            items=matching[skip:skip + limit] if limit else [],
        )

    async def get_entry(self, entry_id: str) -> Entry:
        try:
            return self._entries[entry_id]
        except KeyError:
            raise NotFoundError(f"Entry {entry_id} not found", status_code=404) from None

    async def unpublish_entry(self, entry: Entry) -> Entry:
        self._raise_injected(entry.id)
        current = await self.get_entry(entry.id)
        if not current.is_published:
            raise GatewayError(f"Entry {entry.id} is not published", status_code=400)
        updated = current.model_copy(
            update={"version": current.version + 1, "published_version": None}
        )
        self._entries[entry.id] = updated
        self.unpublished_entries.append(entry.id)
        return updated

    async def delete_entry(self, entry: Entry) -> None:
        self._raise_injected(entry.id)
        if entry.id not in self._entries:
            raise NotFoundError(f"Entry {entry.id} not found", status_code=404)
        del self._entries[entry.id]
        self.deleted_entries.append(entry.id)

    # --- Content types ---

    async def list_content_types(self, skip: int = 0, limit: int = 100) -> Page[ContentType]:
        self.list_calls += 1
        items = list(self._content_types.values())
        return Page[ContentType](
            total=len(items),
            skip=skip,
            limit=limit,
            items=items[skip:skip + limit] if limit else [],
        )

    async def unpublish_content_type(self, content_type: ContentType) -> ContentType:
        self._raise_injected(content_type.id)
        current = self._content_types.get(content_type.id)
        if current is None:
            raise NotFoundError(f"Content type {content_type.id} not found", status_code=404)
        updated = current.model_copy(
            update={"version": current.version + 1, "published_version": None}
        )
        self._content_types[content_type.id] = updated
        return updated

    async def delete_content_type(self, content_type: ContentType) -> None:
        self._raise_injected(content_type.id)
        if content_type.id not in self._content_types:
            raise NotFoundError(f"Content type {content_type.id} not found", status_code=404)
        if any(e.content_type_id == content_type.id for e in self._entries.values()):
            raise ConflictError(
                f"Content type {content_type.id} still has entries", status_code=409
            )
        del self._content_types[content_type.id]
        self.deleted_content_types.append(content_type.id)

    # --- Lifecycle ---

    async def close(self) -> None:
        self._closed = True

    def _raise_injected(self, record_id: str) -> None:
        error = self.failures.get(record_id)
        if error is not None:
            raise error


__all__ = ["MemoryGateway"]
