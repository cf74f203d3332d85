"""Simple logging-based progress reporter.

Text-only progress for CI jobs and redirected output, where a live progress
bar would only produce noise.

Example:
    >>> from contentpurge.reporter import SimpleProgressReporter
    >>>
    >>> reporter = SimpleProgressReporter(every=50)
    >>> reporter.start("Deleting entries", total=500)
    >>> # ... engine ticks ...
    >>> reporter.finish(success=True)

    # Output in logs:
    # [STARTED] Deleting entries: 500 records
    # [PROGRESS] Deleting entries: 50/500 (10%)
    # [COMPLETE] Deleting entries: 500 processed, Duration: 71.3s
"""

from __future__ import annotations

import logging
from datetime import datetime


class SimpleProgressReporter:
    """Logs a line every ``every`` ticks and once at start and finish.

    Attributes:
        completed: Ticks received in the current pass.
        total: Size announced for the current pass.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        log_level: int = logging.INFO,
        every: int = 25,
    ):
        """Initialize the reporter.

        Args:
            logger: Logger to use (default: contentpurge.progress logger)
            log_level: Logging level for progress messages
            every: Log a progress line every this many ticks
        """
        self._logger = logger or logging.getLogger("contentpurge.progress")
        self._log_level = log_level
        self._every = max(1, every)
        self._label = ""
        self._started_at = datetime.now()
        self.completed = 0
        self.total = 0

    def start(self, label: str, total: int) -> None:
        self._label = label
        self._started_at = datetime.now()
        self.completed = 0
        self.total = total
        self._logger.log(self._log_level, f"[STARTED] {label}: {total:,} records")

    def tick(self) -> None:
        self.completed += 1
        if self.completed % self._every == 0:
            percent = min(100.0, self.completed / self.total * 100) if self.total > 0 else 100.0
            self._logger.log(
                self._log_level,
                f"[PROGRESS] {self._label}: {self.completed:,}/{self.total:,} ({percent:.0f}%)",
            )

    def finish(self, success: bool) -> None:
        elapsed = (datetime.now() - self._started_at).total_seconds()
        status = "COMPLETE" if success else "FAILED"
        self._logger.log(
            self._log_level,
            f"[{status}] {self._label}: {self.completed:,} processed, Duration: {elapsed:.1f}s",
        )


__all__ = ["SimpleProgressReporter"]
