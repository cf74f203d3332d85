"""Entry deletion engine.

Pages through the entries of one environment and deletes every entry the
filter accepts, owned child entries first. Work within a page runs
concurrently; pages run strictly one after another, so the batch size bounds
the number of in-flight requests.

A failing entry never stops the run: its error is logged and counted, the
progress reporter still gets its tick, and the scan moves on.

Example:
    >>> import asyncio
    >>> from contentpurge.engine.entries import EntryDeletionEngine
    >>> from contentpurge.gateway.memory import MemoryGateway
    >>> from contentpurge.models import Entry
    >>> async def example():
    ...     gateway = MemoryGateway(entries=[Entry(id=f"e{i}") for i in range(7)])
    ...     summary = await EntryDeletionEngine(gateway).delete_entries(batch_size=5)
    ...     return summary.deleted, gateway.entry_count
    >>> asyncio.run(example())
    (7, 0)
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from contentpurge.core.exceptions import ConfigurationError, NotFoundError
from contentpurge.engine.pagination import PageCursor
from contentpurge.engine.policy import PublishPolicy
from contentpurge.models import DeletionSummary, Entry
from contentpurge.protocols.progress import NullProgressReporter
from contentpurge.relations import RelationResolver

if TYPE_CHECKING:
    from contentpurge.protocols.gateway import RecordGateway
    from contentpurge.protocols.progress import ProgressReporter

logger = logging.getLogger(__name__)


class EntryDeletionEngine:
    """Deletes entries page by page, recursing into owned children.

    Every entry is claimed once per run. A parent whose child is already
    claimed by another in-flight deletion waits for that deletion to settle
    before deleting itself, unless waiting would close a reference cycle.

    Args:
        gateway: Backend access for the target environment.
        reporter: Receives one tick per processed entry.
        resolver: Finds child entries to delete before their owner.
        policy: Decides what happens to published entries.
        verbose: Log every unpublish/delete at INFO instead of DEBUG.
    """

    def __init__(
        self,
        gateway: RecordGateway,
        reporter: ProgressReporter | None = None,
        *,
        resolver: RelationResolver | None = None,
        policy: PublishPolicy = PublishPolicy.SKIP_LIVE,
        verbose: bool = False,
    ) -> None:
        self._gateway = gateway
        self._reporter = reporter or NullProgressReporter()
        self._resolver = resolver or RelationResolver()
        self._policy = policy
        self._verbose = verbose
        self._accept: Callable[[Entry], bool] | None = None
        self._claims: dict[str, asyncio.Future[bool]] = {}
        self._waiting_on: dict[str, str] = {}
        self._deleted: set[str] = set()
        self._filtered: set[str] = set()
        self._summary = DeletionSummary(kind="entries")

    @property
    def policy(self) -> PublishPolicy:
        return self._policy

    async def delete_entries(
        self,
        content_type: str | None = None,
        batch_size: int = 5,
        accept: Callable[[Entry], bool] | None = None,
    ) -> DeletionSummary:
        """Delete all accepted entries, optionally within one content type.

        The filter applies to children reached through relations as well as
        to listed entries.

        Args:
            content_type: Restrict the scan to this content type id.
            batch_size: Page size and concurrency limit.
            accept: Filter predicate; every entry is eligible if omitted.

        Returns:
            Counters for the pass.

        Raises:
            ConfigurationError: If batch_size is not positive.
            GatewayError: If a listing call fails; per-entry failures are
                absorbed.
        """
        if batch_size < 1:
            raise ConfigurationError(f"Batch size must be at least 1, got {batch_size}")

        self._accept = accept
        self._claims = {}
        self._waiting_on = {}
        self._deleted = set()
        self._filtered = set()
        self._summary = summary = DeletionSummary(kind="entries")

        metadata = await self._gateway.list_entries(content_type, skip=0, limit=0)
        summary.total = metadata.total
        scope = f" of content type '{content_type}'" if content_type else ""
        logger.info(f"Deleting {metadata.total} entries{scope}")

        self._reporter.start("Deleting entries", metadata.total)
        cursor = PageCursor(batch_size)
        success = False
        try:
            while True:
                page = await self._gateway.list_entries(
                    content_type, skip=cursor.offset, limit=batch_size
                )
                cursor.observe(page.total)

                eligible = [entry for entry in page.items if self._accepts(entry)]
                await asyncio.gather(*(self._delete_entry(e) for e in eligible))

                # Page entries deleted as another entry's child count too.
                removed = sum(1 for entry in page.items if entry.id in self._deleted)
                logger.debug(
                    f"Page {cursor.pages} at offset {cursor.offset}: "
                    f"{removed}/{len(page.items)} deleted, backend total {page.total}"
                )
                if not cursor.advance(removed):
                    break
            success = summary.ok
        finally:
            summary.pages = cursor.pages
            self._reporter.finish(success)

        return summary.complete()

    def _accepts(self, entry: Entry) -> bool:
        """Apply the filter; a rejected entry is counted and ticked once per run."""
        if self._accept is None or self._accept(entry):
            return True
        if entry.id not in self._filtered:
            self._filtered.add(entry.id)
            self._summary.filtered += 1
            self._reporter.tick()
            logger.debug(f"Entry {entry.id} excluded by filter")
        return False

    async def _delete_entry(self, entry: Entry) -> bool:
        """Unpublish-and-delete one entry, children first.

        Returns:
            True only if this call deleted the entry.
        """
        if entry.id in self._claims:
            logger.debug(f"Entry {entry.id} already visited")
            return False
        claim: asyncio.Future[bool] = asyncio.get_running_loop().create_future()
        self._claims[entry.id] = claim
        self._summary.visited += 1

        deleted = False
        try:
            if self._policy.skips(entry):
                self._summary.skipped += 1
                self._log(f"Skipping published entry {entry.id}")
                return False

            await self._delete_children(entry)

            if self._policy.unpublishes(entry):
                self._log(f"Unpublishing entry {entry.id}")
                entry = await self._gateway.unpublish_entry(entry)

            self._log(f"Deleting entry {entry.id}")
            await self._gateway.delete_entry(entry)
            self._deleted.add(entry.id)
            self._summary.deleted += 1
            deleted = True
            return True
        except Exception as e:
            logger.warning(f"Failed to delete entry {entry.id}: {e}")
            logger.debug(f"Traceback for entry {entry.id}", exc_info=True)
            self._summary.record_failure(entry.id, e)
            return False
        finally:
            claim.set_result(deleted)
            self._reporter.tick()

    async def _delete_children(self, entry: Entry) -> None:
        """Delete owned entries field by field; a bad child never blocks its siblings."""
        for field, child_ids in self._resolver.relations(entry):
            if child_ids:
                self._log(f"Entry {entry.id} owns {len(child_ids)} entries via '{field}'")
            for child_id in child_ids:
                if child_id in self._filtered:
                    continue
                if child_id not in self._claims:
                    try:
                        child = await self._gateway.get_entry(child_id)
                    except NotFoundError:
                        logger.debug(f"Child entry {child_id} of {entry.id} no longer exists")
                        continue
                    except Exception as e:
                        logger.warning(f"Failed to fetch child entry {child_id} of {entry.id}: {e}")
                        self._summary.record_failure(child_id, e)
                        continue
                    # The fetch suspends, so another task may have claimed the child meanwhile.
                    if child_id not in self._claims:
                        if not self._accepts(child):
                            continue
                        self._waiting_on[entry.id] = child_id
                        try:
                            await self._delete_entry(child)
                        finally:
                            del self._waiting_on[entry.id]
                        continue
                await self._wait_for_claim(entry.id, child_id)

    async def _wait_for_claim(self, owner_id: str, child_id: str) -> None:
        """Wait until the deletion that claimed child_id has settled."""
        node: str | None = child_id
        while node is not None:
            if node == owner_id:
                logger.debug(f"Reference cycle between {owner_id} and {child_id}")
                return
            node = self._waiting_on.get(node)

        self._waiting_on[owner_id] = child_id
        try:
            await asyncio.shield(self._claims[child_id])
        finally:
            del self._waiting_on[owner_id]

    def _log(self, message: str) -> None:
        logger.log(logging.INFO if self._verbose else logging.DEBUG, message)


__all__ = ["EntryDeletionEngine"]
