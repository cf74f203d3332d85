"""Tests for contentpurge.models.summary."""

from __future__ import annotations

from contentpurge.models import DeletionSummary


class TestDeletionSummary:
    """Per-pass counters."""

    def test_defaults(self) -> None:
        summary = DeletionSummary(kind="entries")
        assert summary.deleted == 0
        assert summary.failures == []
        assert summary.ok
        assert summary.completed_at is None

    def test_record_failure(self) -> None:
        summary = DeletionSummary(kind="entries")
        summary.record_failure("e1", RuntimeError("boom"))
        assert summary.failed == 1
        assert summary.failures == ["e1: boom"]
        assert not summary.ok

    def test_complete_sets_end_time(self) -> None:
        summary = DeletionSummary(kind="content types")
        assert summary.complete() is summary
        assert summary.completed_at is not None
        assert summary.duration_seconds >= 0
