"""Offset pagination over a collection that shrinks while it is scanned.

Deleting records from the list being paged shifts every later record towards
the front. If the offset advanced by the full page size after a page whose
records were deleted, the records that slid into the current window would
never be seen. The cursor therefore only steps over the records that are
still there:

    offset += batch_size - removed

With 12 records, a batch size of 5 and every record deleted, the offset stays
at 0 for three pages of 5, 5 and 2 records.

Example:
    >>> from contentpurge.engine.pagination import PageCursor
    >>> cursor = PageCursor(batch_size=5)
    >>> cursor.observe(12); cursor.advance(removed=5)
    True
    >>> cursor.offset
    0
    >>> cursor.observe(7); cursor.advance(removed=3)
    True
    >>> cursor.offset
    2
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PageCursor:
    """Loop state for a paged scan with drift correction.

    Attributes:
        batch_size: Page size; also the number of concurrent deletions.
        offset: Skip value for the next page request.
        total: Collection size reported with the most recent page.
        pages: Number of pages observed so far.
        finished: Set once the scan has covered the whole collection.
    """

    batch_size: int
    offset: int = 0
    total: int = 0
    pages: int = 0
    finished: bool = False

    def __post_init__(self) -> None:
        if self.batch_size < 1:
            raise ValueError(f"batch_size must be at least 1, got {self.batch_size}")

    def observe(self, total: int) -> None:
        """Record the total the backend reported with the current page."""
        self.total = total
        self.pages += 1

    def advance(self, removed: int) -> bool:
        """Move past the current page.

        Args:
            removed: Records of the current page that no longer exist.

        Returns:
            True if another page has to be fetched.

        Example:
            >>> cursor = PageCursor(batch_size=5)
            >>> cursor.observe(2)
            >>> cursor.advance(removed=2)
            False
        """
        removed = max(0, min(removed, self.batch_size))
        self.offset += self.batch_size - removed
        remaining = self.total - removed

        # The backend total is the primary stop signal: once it fits into one
        # page, that page was the last. The window check ends scans where too
        # many records are kept for the total to ever drop that far.
        self.finished = self.total <= self.batch_size or self.offset >= remaining
        return not self.finished


__all__ = ["PageCursor"]
