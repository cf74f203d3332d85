"""Content type deletion engine.

Structural twin of the entry engine without filtering or recursion. Run it
only after the entries are gone: the backend refuses to delete a content type
that still has entries.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from contentpurge.core.exceptions import ConfigurationError
from contentpurge.engine.pagination import PageCursor
from contentpurge.models import ContentType, DeletionSummary
from contentpurge.protocols.progress import NullProgressReporter

if TYPE_CHECKING:
    from contentpurge.protocols.gateway import RecordGateway
    from contentpurge.protocols.progress import ProgressReporter

logger = logging.getLogger(__name__)


class SchemaDeletionEngine:
    """Unpublishes and deletes every content type of an environment."""

    def __init__(
        self,
        gateway: RecordGateway,
        reporter: ProgressReporter | None = None,
        *,
        verbose: bool = False,
    ) -> None:
        self._gateway = gateway
        self._reporter = reporter or NullProgressReporter()
        self._verbose = verbose
        self._summary = DeletionSummary(kind="content types")

    async def delete_schemas(self, batch_size: int = 5) -> DeletionSummary:
        """Delete all content types, ``batch_size`` at a time.

        Raises:
            ConfigurationError: If batch_size is not positive.
            GatewayError: If a listing call fails.
        """
        if batch_size < 1:
            raise ConfigurationError(f"Batch size must be at least 1, got {batch_size}")

        self._summary = summary = DeletionSummary(kind="content types")

        metadata = await self._gateway.list_content_types(skip=0, limit=0)
        summary.total = metadata.total
        logger.info(f"Deleting {metadata.total} content types")

        self._reporter.start("Deleting content types", metadata.total)
        cursor = PageCursor(batch_size)
        success = False
        try:
            while True:
                page = await self._gateway.list_content_types(skip=cursor.offset, limit=batch_size)
                cursor.observe(page.total)
                results = await asyncio.gather(
                    *(self._delete_content_type(ct) for ct in page.items)
                )
                if not cursor.advance(sum(1 for deleted in results if deleted)):
                    break
            success = summary.ok
        finally:
            summary.pages = cursor.pages
            self._reporter.finish(success)

        return summary.complete()

    async def _delete_content_type(self, content_type: ContentType) -> bool:
        self._summary.visited += 1
        try:
            if content_type.is_published:
                self._log(f"Unpublishing content type {content_type.id}")
                content_type = await self._gateway.unpublish_content_type(content_type)
            self._log(f"Deleting content type {content_type.id}")
            await self._gateway.delete_content_type(content_type)
            self._summary.deleted += 1
            return True
        except Exception as e:
            logger.warning(f"Failed to delete content type {content_type.id}: {e}")
            logger.debug(f"Traceback for content type {content_type.id}", exc_info=True)
            self._summary.record_failure(content_type.id, e)
            return False
        finally:
            self._reporter.tick()

    def _log(self, message: str) -> None:
        logger.log(logging.INFO if self._verbose else logging.DEBUG, message)


__all__ = ["SchemaDeletionEngine"]
