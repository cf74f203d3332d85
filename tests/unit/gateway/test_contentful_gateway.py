"""Tests for contentpurge.gateway.contentful - ContentfulGateway.

Requests are answered by an ``httpx.MockTransport`` handler, so the exact
URLs, query parameters and headers the gateway sends can be asserted.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from contentpurge.core.config import Settings
from contentpurge.core.exceptions import ConflictError, GatewayError, NotFoundError
from contentpurge.gateway.contentful import ContentfulGateway
from contentpurge.models import ContentType, Entry, PublishState

ENV_PATH = "/spaces/space1/environments/staging"

# =============================================================================
# Test Fixtures and Helpers
# =============================================================================


def entry_payload(entry_id: str, version: int = 1, published_version: int | None = None) -> dict[str, Any]:
    sys: dict[str, Any] = {
        "id": entry_id,
        "type": "Entry",
        "version": version,
        "contentType": {"sys": {"type": "Link", "linkType": "ContentType", "id": "post"}},
    }
    if published_version is not None:
        sys["publishedVersion"] = published_version
    return {"sys": sys, "fields": {"title": {"en-US": entry_id}}}


class Backend:
    """Records requests and answers them through a route function."""

    def __init__(self, route: Callable[[httpx.Request], httpx.Response]) -> None:
        self.route = route
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.route(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def make_gateway(backend: Backend, **settings: Any) -> ContentfulGateway:
    options: dict[str, Any] = {"rate_limit": 1000.0, "max_retries": 0}
    options.update(settings)
    return ContentfulGateway(
        "space1",
        "secret-token",
        "staging",
        settings=Settings(**options),
        transport=httpx.MockTransport(backend),
    )


def json_response(payload: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, json=payload)


# =============================================================================
# Reads
# =============================================================================


class TestContentfulReads:
    """Space lookup, listings and single fetches."""

    async def test_space_name_and_auth_header(self) -> None:
        backend = Backend(lambda request: json_response({"name": "Blog", "sys": {"id": "space1"}}))

        async with make_gateway(backend) as gateway:
            assert await gateway.get_space_name() == "Blog"

        request = backend.last
        assert request.url.path == "/spaces/space1"
        assert request.headers["Authorization"] == "Bearer secret-token"

    async def test_list_entries(self) -> None:
        backend = Backend(
            lambda request: json_response(
                {
                    "total": 12,
                    "skip": 5,
                    "limit": 5,
                    "items": [entry_payload("e1"), entry_payload("e2", 3, 2)],
                }
            )
        )

        async with make_gateway(backend) as gateway:
            page = await gateway.list_entries(skip=5, limit=5)

        assert page.total == 12
        assert [e.id for e in page.items] == ["e1", "e2"]
        assert page.items[1].publish_state is PublishState.PUBLISHED
        request = backend.last
        assert request.method == "GET"
        assert request.url.path == f"{ENV_PATH}/entries"
        assert request.url.params["skip"] == "5"
        assert request.url.params["limit"] == "5"
        assert request.url.params["order"] == "sys.createdAt"
        assert "content_type" not in request.url.params

    async def test_list_entries_scoped(self) -> None:
        backend = Backend(lambda request: json_response({"total": 0, "items": []}))

        async with make_gateway(backend) as gateway:
            page = await gateway.list_entries("episode", skip=0, limit=0)

        assert page.total == 0
        assert backend.last.url.params["content_type"] == "episode"
        assert backend.last.url.params["limit"] == "0"

    async def test_get_entry(self) -> None:
        backend = Backend(lambda request: json_response(entry_payload("e1", 7, 4)))

        async with make_gateway(backend) as gateway:
            entry = await gateway.get_entry("e1")

        assert entry.version == 7
        assert entry.publish_state is PublishState.CHANGED
        assert backend.last.url.path == f"{ENV_PATH}/entries/e1"

    async def test_get_missing_entry(self) -> None:
        backend = Backend(lambda request: json_response({"sys": {"id": "NotFound"}}, 404))

        async with make_gateway(backend) as gateway:
            with pytest.raises(NotFoundError) as exc_info:
                await gateway.get_entry("gone")

        assert exc_info.value.status_code == 404

    async def test_list_content_types(self) -> None:
        backend = Backend(
            lambda request: json_response(
                {
                    "total": 1,
                    "items": [{"sys": {"id": "post", "version": 2, "publishedVersion": 1}, "name": "Post"}],
                }
            )
        )

        async with make_gateway(backend) as gateway:
            page = await gateway.list_content_types(skip=0, limit=5)

        assert page.items[0].name == "Post"
        assert page.items[0].is_published
        assert backend.last.url.path == f"{ENV_PATH}/content_types"


# =============================================================================
# Writes
# =============================================================================


class TestContentfulWrites:
    """Unpublish and delete calls carry the record version."""

    async def test_unpublish_entry(self) -> None:
        backend = Backend(lambda request: json_response(entry_payload("e1", 4)))

        async with make_gateway(backend) as gateway:
            updated = await gateway.unpublish_entry(Entry(id="e1", version=3, published_version=2))

        request = backend.last
        assert request.method == "DELETE"
        assert request.url.path == f"{ENV_PATH}/entries/e1/published"
        assert request.headers["X-Contentful-Version"] == "3"
        assert updated.version == 4
        assert not updated.is_published

    async def test_delete_entry(self) -> None:
        backend = Backend(lambda request: httpx.Response(204))

        async with make_gateway(backend) as gateway:
            await gateway.delete_entry(Entry(id="e1", version=9))

        request = backend.last
        assert request.method == "DELETE"
        assert request.url.path == f"{ENV_PATH}/entries/e1"
        assert request.headers["X-Contentful-Version"] == "9"

    async def test_delete_conflict(self) -> None:
        backend = Backend(lambda request: json_response({"sys": {"id": "VersionMismatch"}}, 409))

        async with make_gateway(backend) as gateway:
            with pytest.raises(ConflictError):
                await gateway.delete_entry(Entry(id="e1"))

    async def test_server_error(self) -> None:
        backend = Backend(lambda request: httpx.Response(500, text="oops"))

        async with make_gateway(backend) as gateway:
            with pytest.raises(GatewayError) as exc_info:
                await gateway.delete_entry(Entry(id="e1"))

        assert exc_info.value.status_code == 500
        assert not isinstance(exc_info.value, NotFoundError)
        assert "Delete entry e1" in str(exc_info.value)

    async def test_unpublish_and_delete_content_type(self) -> None:
        def route(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("/published"):
                return json_response({"sys": {"id": "post", "version": 3}, "name": "Post"})
            return httpx.Response(204)

        backend = Backend(route)

        async with make_gateway(backend) as gateway:
            ct = await gateway.unpublish_content_type(ContentType(id="post", version=2, published_version=1))
            await gateway.delete_content_type(ct)

        unpublish, delete = backend.requests
        assert unpublish.url.path == f"{ENV_PATH}/content_types/post/published"
        assert unpublish.headers["X-Contentful-Version"] == "2"
        assert delete.url.path == f"{ENV_PATH}/content_types/post"
        assert delete.headers["X-Contentful-Version"] == "3"

    async def test_retries_server_errors(self, monkeypatch: pytest.MonkeyPatch) -> None:
        async def no_sleep(delay: float) -> None:
            return None

        monkeypatch.setattr("contentpurge.http.client.asyncio.sleep", no_sleep)
        responses = iter([httpx.Response(503), httpx.Response(204)])
        backend = Backend(lambda request: next(responses))

        async with make_gateway(backend, max_retries=2) as gateway:
            await gateway.delete_entry(Entry(id="e1"))

        assert len(backend.requests) == 2


class TestContentfulGatewayPaths:
    """Static properties."""

    def test_environment_path(self) -> None:
        gateway = ContentfulGateway("abc", "token", "master", settings=Settings())
        assert gateway.environment_path == "/spaces/abc/environments/master"
        assert gateway.space_id == "abc"
        assert gateway.environment == "master"

    async def test_management_content_type_header(self) -> None:
        backend = Backend(lambda request: json_response({"total": 0, "items": []}))

        async with make_gateway(backend) as gateway:
            await gateway.list_content_types()

        assert backend.last.headers["Content-Type"] == "application/vnd.contentful.management.v1+json"
