"""Contentful Content Management API gateway.

Implements RecordGateway over the CMA REST endpoints of one
space/environment. Every write sends the record's current version in the
``X-Contentful-Version`` header, as the API requires for optimistic locking.

Example:
    >>> from contentpurge.gateway.contentful import ContentfulGateway
    >>> gateway = ContentfulGateway(space_id="abc123", token="CFPAT-...", environment="staging")
    >>> gateway.environment_path
    '/spaces/abc123/environments/staging'
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from contentpurge.core.config import Settings, get_settings
from contentpurge.core.exceptions import ConflictError, GatewayError, NotFoundError
from contentpurge.http.client import HttpClient, HttpClientError
from contentpurge.models import ContentType, Entry, Page

logger = logging.getLogger(__name__)

# Stable listing order; creation time never changes during a purge
LIST_ORDER = "sys.createdAt"


def _gateway_error(error: HttpClientError, action: str) -> GatewayError:
    """Translate an HTTP failure into the gateway error hierarchy."""
    message = f"{action} failed: {error}"
    if error.status_code == 404:
        return NotFoundError(message, status_code=404)
    if error.status_code == 409:
        return ConflictError(message, status_code=409)
    return GatewayError(message, status_code=error.status_code)


class ContentfulGateway:
    """RecordGateway backed by the Contentful Content Management API.

    Args:
        space_id: Target space.
        token: Content Management API token.
        environment: Environment name inside the space.
        settings: HTTP settings (base URL, rate limit, timeout, retries).
        transport: Custom httpx transport, for tests.
    """

    def __init__(
        self,
        space_id: str,
        token: str,
        environment: str = "master",
        *,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        settings = settings or get_settings()
        self._space_id = space_id
        self._environment = environment
        self._client = HttpClient(
            settings.base_url,
            token=token,
            rate_limit=settings.rate_limit,
            timeout=settings.request_timeout,
            max_retries=settings.max_retries,
            headers={"Content-Type": "application/vnd.contentful.management.v1+json"},
            transport=transport,
        )

    @property
    def space_id(self) -> str:
        return self._space_id

    @property
    def environment(self) -> str:
        return self._environment

    @property
    def environment_path(self) -> str:
        return f"/spaces/{self._space_id}/environments/{self._environment}"

    async def get_space_name(self) -> str:
        payload = await self._get(f"/spaces/{self._space_id}", action=f"Open space {self._space_id}")
        return payload.get("name") or self._space_id

    # --- Entries ---

    async def list_entries(
        self,
        content_type: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> Page[Entry]:
        params: dict[str, Any] = {"skip": skip, "limit": limit, "order": LIST_ORDER}
        if content_type:
            params["content_type"] = content_type
        payload = await self._get(
            f"{self.environment_path}/entries", params=params, action="List entries"
        )
        return Page[Entry](
            total=payload.get("total", 0),
            skip=payload.get("skip", skip),
            limit=payload.get("limit", limit),
            items=[Entry.from_api(item) for item in payload.get("items", [])],
        )

    async def get_entry(self, entry_id: str) -> Entry:
        payload = await self._get(
            f"{self.environment_path}/entries/{entry_id}", action=f"Fetch entry {entry_id}"
        )
        return Entry.from_api(payload)

    async def unpublish_entry(self, entry: Entry) -> Entry:
        response = await self._delete(
            f"{self.environment_path}/entries/{entry.id}/published",
            version=entry.version,
            action=f"Unpublish entry {entry.id}",
        )
        return Entry.from_api(response.json())

    async def delete_entry(self, entry: Entry) -> None:
        await self._delete(
            f"{self.environment_path}/entries/{entry.id}",
            version=entry.version,
            action=f"Delete entry {entry.id}",
        )

    # --- Content types ---

    async def list_content_types(self, skip: int = 0, limit: int = 100) -> Page[ContentType]:
        payload = await self._get(
            f"{self.environment_path}/content_types",
            params={"skip": skip, "limit": limit, "order": LIST_ORDER},
            action="List content types",
        )
        return Page[ContentType](
            total=payload.get("total", 0),
            skip=payload.get("skip", skip),
            limit=payload.get("limit", limit),
            items=[ContentType.from_api(item) for item in payload.get("items", [])],
        )

    async def unpublish_content_type(self, content_type: ContentType) -> ContentType:
        response = await self._delete(
            f"{self.environment_path}/content_types/{content_type.id}/published",
            version=content_type.version,
            action=f"Unpublish content type {content_type.id}",
        )
        return ContentType.from_api(response.json())

    async def delete_content_type(self, content_type: ContentType) -> None:
        await self._delete(
            f"{self.environment_path}/content_types/{content_type.id}",
            version=content_type.version,
            action=f"Delete content type {content_type.id}",
        )

    # --- Lifecycle ---

    async def close(self) -> None:
        await self._client.close()

    async def __aenter__(self) -> ContentfulGateway:
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    # --- Helpers ---

    async def _get(self, url: str, *, action: str, params: dict[str, Any] | None = None) -> Any:
        try:
            return await self._client.get_json(url, params=params)
        except HttpClientError as e:
            raise _gateway_error(e, action) from e

    async def _delete(self, url: str, *, version: int, action: str) -> httpx.Response:
        try:
            return await self._client.delete(url, headers={"X-Contentful-Version": str(version)})
        except HttpClientError as e:
            raise _gateway_error(e, action) from e


__all__ = ["ContentfulGateway"]
