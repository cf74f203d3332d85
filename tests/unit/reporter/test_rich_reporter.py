"""Tests for contentpurge.reporter.rich - RichProgressReporter."""

from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from contentpurge.protocols.progress import ProgressReporter
from contentpurge.reporter.rich import RichProgressReporter


@pytest.fixture
def output() -> StringIO:
    return StringIO()


@pytest.fixture
def reporter(output: StringIO) -> RichProgressReporter:
    console = Console(file=output, force_terminal=False, width=120)
    return RichProgressReporter(console=console, refresh_per_second=10)


class TestRichProgressReporter:
    """Progress bar lifecycle."""

    def test_satisfies_protocol(self, reporter: RichProgressReporter) -> None:
        assert isinstance(reporter, ProgressReporter)

    def test_counts_ticks(self, reporter: RichProgressReporter) -> None:
        reporter.start("Deleting entries", 3)
        for _ in range(3):
            reporter.tick()
        reporter.finish(success=True)

        assert reporter.completed == 3
        assert reporter.total == 3

    def test_total_raised_when_overtaken(self, reporter: RichProgressReporter) -> None:
        """Children deleted through relations can tick past the listed total."""
        reporter.start("Deleting entries", 1)
        reporter.tick()
        reporter.tick()
        reporter.finish(success=True)

        assert reporter.total == 2

    def test_final_line_marks_outcome(self, reporter: RichProgressReporter, output: StringIO) -> None:
        reporter.start("Deleting content types", 1)
        reporter.tick()
        reporter.finish(success=False)

        assert "✗ Deleting content types" in output.getvalue()

    def test_restart_resets_counters(self, reporter: RichProgressReporter) -> None:
        reporter.start("Deleting entries", 2)
        reporter.tick()
        reporter.start("Deleting content types", 5)

        assert reporter.completed == 0
        assert reporter.total == 5
        reporter.finish(success=True)

    def test_tick_and_finish_without_start(self, reporter: RichProgressReporter) -> None:
        reporter.tick()
        reporter.finish(success=True)
        assert reporter.completed == 1
