"""contentpurge progress reporter implementations.

Provides concrete implementations of the ProgressReporter protocol
for different output targets.

Example:
    >>> from contentpurge.reporter import RichProgressReporter, SimpleProgressReporter
    >>>
    >>> # Rich terminal output with progress bars
    >>> reporter = RichProgressReporter()
    >>>
    >>> # Simple logging output
    >>> reporter = SimpleProgressReporter()
"""

from contentpurge.reporter.rich import RichProgressReporter
from contentpurge.reporter.simple import SimpleProgressReporter

__all__ = [
    "RichProgressReporter",
    "SimpleProgressReporter",
]
