"""Deletion run statistics.

Example:
    >>> from contentpurge.models.summary import DeletionSummary
    >>> summary = DeletionSummary(kind="entries", visited=10, deleted=7, skipped=2, failed=1)
    >>> summary.ok
    False
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass
class DeletionSummary:
    """Counters for one engine pass.

    Attributes:
        kind: What was deleted ("entries" or "content types").
        total: Collection size reported before the first page.
        visited: Records handed to the delete procedure, children included.
        deleted: Records actually deleted.
        skipped: Records left alone by the publish policy.
        filtered: Records rejected by the filter predicate, listed or owned.
        failed: Records whose unpublish, fetch or delete raised.
        failures: One line per failure, ``"<id>: <error>"``.
    """

    kind: str
    total: int = 0
    visited: int = 0
    deleted: int = 0
    skipped: int = 0
    filtered: int = 0
    failed: int = 0
    pages: int = 0
    failures: list[str] = field(default_factory=list)
    started_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    completed_at: datetime | None = None

    @property
    def ok(self) -> bool:
        return self.failed == 0

    @property
    def duration_seconds(self) -> float:
        end = self.completed_at or datetime.now(UTC)
        return (end - self.started_at).total_seconds()

    def record_failure(self, record_id: str, error: BaseException) -> None:
        self.failed += 1
        self.failures.append(f"{record_id}: {error}")

    def complete(self) -> DeletionSummary:
        self.completed_at = datetime.now(UTC)
        return self
