"""Rich-based progress reporter for terminal output.

One progress bar per engine pass, with rate and time remaining, in the spirit
of the classic ``[:bar] rate: :rate/s, done: :percent, time left: :etas``
display.

Example:
    >>> from contentpurge.reporter import RichProgressReporter
    >>>
    >>> reporter = RichProgressReporter()
    >>> reporter.start("Deleting entries", total=120)
    >>> reporter.tick()
    >>> reporter.finish(success=True)
"""

from __future__ import annotations

import logging
from datetime import datetime

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)

logger = logging.getLogger(__name__)


class RichProgressReporter:
    """Live progress bar for one pass at a time.

    The backend total can shrink or grow while a pass runs (children deleted
    through relations tick too), so the bar total is raised when the tick
    count overtakes it.

    Attributes:
        completed: Ticks received in the current pass.
        total: Size announced for the current pass.
    """

    def __init__(
        self,
        console: Console | None = None,
        refresh_per_second: int = 4,
        transient: bool = False,
    ):
        """Initialize the reporter.

        Args:
            console: Rich Console to use (default: new console)
            refresh_per_second: How often to refresh display (default: 4)
            transient: Remove the bar once the pass finishes
        """
        self._console = console or Console()
        self._refresh_per_second = refresh_per_second
        self._transient = transient

        self._progress: Progress | None = None
        self._task: TaskID | None = None
        self._label = ""
        self._started_at: datetime | None = None
        self.completed = 0
        self.total = 0

    @property
    def console(self) -> Console:
        return self._console

    def start(self, label: str, total: int) -> None:
        """Open a progress bar for a new pass."""
        if self._progress is not None:
            self._progress.stop()

        self._label = label
        self._started_at = datetime.now()
        self.completed = 0
        self.total = total

        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(bar_width=30),
            MofNCompleteColumn(),
            TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
            TimeElapsedColumn(),
            TimeRemainingColumn(),
            console=self._console,
            refresh_per_second=self._refresh_per_second,
            transient=self._transient,
        )
        self._task = self._progress.add_task(label, total=max(total, 1))
        self._progress.start()

    def tick(self) -> None:
        """Advance the bar by one record."""
        self.completed += 1
        if self._progress is None or self._task is None:
            return
        if self.completed > self.total:
            self.total = self.completed
            self._progress.update(self._task, total=self.total)
        self._progress.advance(self._task, 1)

    def finish(self, success: bool) -> None:
        """Close the bar and print a one-line result."""
        if self._progress is None:
            return

        if self._task is not None:
            description = (
                f"[green]✓ {self._label}[/green]" if success else f"[red]✗ {self._label}[/red]"
            )
            self._progress.update(self._task, description=description)
        self._progress.stop()
        self._progress = None
        self._task = None

        elapsed = (datetime.now() - self._started_at).total_seconds() if self._started_at else 0.0
        rate = self.completed / elapsed if elapsed > 0 else 0.0
        logger.debug(f"{self._label}: {self.completed} processed in {elapsed:.1f}s ({rate:,.1f}/s)")


__all__ = ["RichProgressReporter"]
