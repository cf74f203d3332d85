"""ContentPurge - orchestrates a purge run.

Entries first, then (optionally) content types, each pass gated by a
confirmation prompt that is asked before anything is deleted.

Example:
    >>> import asyncio
    >>> from contentpurge.core.purge import ContentPurge
    >>> from contentpurge.gateway.memory import MemoryGateway
    >>> from contentpurge.models import ContentType, Entry
    >>> from contentpurge.prompt import AutoConfirmPrompt
    >>> async def example():
    ...     gateway = MemoryGateway(
    ...         entries=[Entry(id="e1", content_type_id="post")],
    ...         content_types=[ContentType(id="post")],
    ...     )
    ...     purge = ContentPurge(gateway, AutoConfirmPrompt(), space_id="abc", environment="master")
    ...     result = await purge.run(delete_content_types=True)
    ...     return result.total_deleted
    >>> asyncio.run(example())
    2
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from contentpurge.engine.entries import EntryDeletionEngine
from contentpurge.engine.policy import PublishPolicy
from contentpurge.engine.schemas import SchemaDeletionEngine
from contentpurge.models import DeletionSummary, Entry
from contentpurge.protocols.progress import NullProgressReporter
from contentpurge.relations import RelationResolver

if TYPE_CHECKING:
    from contentpurge.protocols.gateway import RecordGateway
    from contentpurge.protocols.progress import ProgressReporter
    from contentpurge.protocols.prompt import ConfirmationPrompt

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    """Outcome of a purge run.

    Example:
        >>> from contentpurge.models import DeletionSummary
        >>> result = RunResult(entries=DeletionSummary(kind="entries", deleted=3, failed=1))
        >>> result.total_deleted, result.total_failed, result.ok
        (3, 1, False)
    """

    entries: DeletionSummary | None = None
    content_types: DeletionSummary | None = None
    cancelled: bool = False

    @property
    def summaries(self) -> list[DeletionSummary]:
        return [s for s in (self.entries, self.content_types) if s is not None]

    @property
    def total_deleted(self) -> int:
        return sum(s.deleted for s in self.summaries)

    @property
    def total_failed(self) -> int:
        return sum(s.failed for s in self.summaries)

    @property
    def ok(self) -> bool:
        return self.total_failed == 0


class ContentPurge:
    """Runs the entry pass and the optional content type pass.

    Args:
        gateway: Backend access for the target environment.
        prompt: Asked once before each destructive pass.
        reporter: Progress reporter shared by both passes.
        space_id: Shown in confirmation messages.
        environment: Shown in confirmation messages.
        resolver: Relation resolver for owned entries.
        policy: Publish-state policy for entries.
        verbose: Per-record logging at INFO.
    """

    def __init__(
        self,
        gateway: RecordGateway,
        prompt: ConfirmationPrompt,
        reporter: ProgressReporter | None = None,
        *,
        space_id: str = "",
        environment: str = "master",
        resolver: RelationResolver | None = None,
        policy: PublishPolicy = PublishPolicy.SKIP_LIVE,
        verbose: bool = False,
    ) -> None:
        self._gateway = gateway
        self._prompt = prompt
        self._reporter = reporter or NullProgressReporter()
        self._space_id = space_id
        self._environment = environment
        self._resolver = resolver or RelationResolver()
        self._policy = policy
        self._verbose = verbose

    @property
    def target(self) -> str:
        return f"{self._space_id}:{self._environment}"

    async def run(
        self,
        *,
        content_type: str | None = None,
        batch_size: int = 5,
        delete_content_types: bool = False,
        accept: Callable[[Entry], bool] | None = None,
    ) -> RunResult:
        """Delete entries, then content types if requested.

        Returns:
            RunResult; ``cancelled`` is set when a prompt was declined.
        """
        result = RunResult()

        if not await self._confirm(f"Do you really want to delete all entries from space {self.target}?"):
            logger.info("Entry deletion cancelled")
            result.cancelled = True
            return result

        entries = EntryDeletionEngine(
            self._gateway,
            self._reporter,
            resolver=self._resolver,
            policy=self._policy,
            verbose=self._verbose,
        )
        result.entries = await entries.delete_entries(
            content_type=content_type, batch_size=batch_size, accept=accept
        )

        if not delete_content_types:
            return result

        if not await self._confirm(
            f"Do you really want to delete all content types from space {self.target}?"
        ):
            logger.info("Content type deletion cancelled")
            result.cancelled = True
            return result

        schemas = SchemaDeletionEngine(self._gateway, self._reporter, verbose=self._verbose)
        result.content_types = await schemas.delete_schemas(batch_size=batch_size)
        return result

    async def _confirm(self, message: str) -> bool:
        # Prompts block on stdin; keep them off the event loop thread.
        return await asyncio.to_thread(self._prompt.confirm, message)


__all__ = ["ContentPurge", "RunResult"]
