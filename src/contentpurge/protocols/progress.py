"""Progress reporting protocol for contentpurge.

The deletion engines size a reporter once per pass and then send one tick per
processed record, whatever the outcome (deleted, skipped, filtered, failed).

Example:
    >>> from contentpurge.protocols.progress import CallbackProgressReporter
    >>> ticks = []
    >>> reporter = CallbackProgressReporter(on_tick=lambda: ticks.append(1))
    >>> reporter.start("Deleting entries", total=3)
    >>> reporter.tick()
    >>> len(ticks)
    1
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class ProgressReporter(Protocol):
    """Protocol for progress reporting implementations.

    Example:
        >>> class LoggingReporter:
        ...     def start(self, label: str, total: int) -> None:
        ...         logger.info(f"{label}: {total} records")
        ...
        ...     def tick(self) -> None:
        ...         self.done += 1
        ...
        ...     def finish(self, success: bool) -> None:
        ...         logger.info(f"done ({'ok' if success else 'with failures'})")
    """

    def start(self, label: str, total: int) -> None:
        """Called once per engine pass, before the first page.

        Args:
            label: What is being processed, e.g. "Deleting entries"
            total: Expected number of records (the backend's count)
        """
        ...

    def tick(self) -> None:
        """Called exactly once per processed record."""
        ...

    def finish(self, success: bool) -> None:
        """Called when the pass ends.

        Args:
            success: True if no record failed
        """
        ...


class NullProgressReporter:
    """No-op progress reporter (default when none specified)."""

    def start(self, label: str, total: int) -> None:
        pass

    def tick(self) -> None:
        pass

    def finish(self, success: bool) -> None:
        pass


class CallbackProgressReporter:
    """Progress reporter that calls plain functions.

    Example:
        >>> reporter = CallbackProgressReporter(on_start=lambda label, total: print(label, total))
        >>> reporter.start("Deleting content types", 4)
        Deleting content types 4
    """

    def __init__(
        self,
        on_tick: Callable[[], None] | None = None,
        on_start: Callable[[str, int], None] | None = None,
        on_finish: Callable[[bool], None] | None = None,
    ):
        self._on_tick = on_tick
        self._on_start = on_start
        self._on_finish = on_finish

    def start(self, label: str, total: int) -> None:
        if self._on_start:
            self._on_start(label, total)

    def tick(self) -> None:
        if self._on_tick:
            self._on_tick()

    def finish(self, success: bool) -> None:
        if self._on_finish:
            self._on_finish(success)


__all__ = [
    "ProgressReporter",
    "NullProgressReporter",
    "CallbackProgressReporter",
]
