"""Record selection from ignore and remove lists.

An ignore list names entries that must survive the run; a remove list names
the only entries that may be deleted. Both are plain text files with one
entry id per line.

Example:
    >>> from contentpurge.selection import RecordFilter, FilterMode
    >>> from contentpurge.models import Entry
    >>> keep = RecordFilter(FilterMode.IGNORE, frozenset({"home"}))
    >>> keep(Entry(id="home")), keep(Entry(id="post-1"))
    (False, True)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from contentpurge.core.exceptions import ConfigurationError
from contentpurge.models import Entry

logger = logging.getLogger(__name__)


class FilterMode(str, Enum):
    """How a filter treats its id set."""

    ALL = "all"  # No list: everything is eligible
    IGNORE = "ignore"  # Listed ids are excluded
    REMOVE = "remove"  # Only listed ids are eligible


@dataclass(frozen=True)
class RecordFilter:
    """Predicate deciding whether a listed entry is eligible for deletion.

    Example:
        >>> only = RecordFilter(FilterMode.REMOVE, frozenset({"a"}))
        >>> only(Entry(id="a")), only(Entry(id="b"))
        (True, False)
        >>> RecordFilter()(Entry(id="anything"))
        True
    """

    mode: FilterMode = FilterMode.ALL
    ids: frozenset[str] = field(default_factory=frozenset)

    def __call__(self, entry: Entry) -> bool:
        if self.mode is FilterMode.IGNORE:
            return entry.id not in self.ids
        if self.mode is FilterMode.REMOVE:
            return entry.id in self.ids
        return True


def load_id_list(path: Path | str) -> frozenset[str]:
    """Read a newline separated id list.

    Handles CRLF line endings; blank lines and surrounding whitespace are
    dropped.

    Raises:
        ConfigurationError: If the file cannot be read.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read id list {path}: {e}") from e
    return frozenset(line.strip() for line in text.splitlines() if line.strip())


def build_filter(
    ignore_list: Path | str | None = None,
    remove_list: Path | str | None = None,
) -> RecordFilter:
    """Build the run's filter predicate.

    The ignore list wins when both lists are given; the remove list is then
    not read at all.

    Args:
        ignore_list: File of ids that must not be deleted.
        remove_list: File of the only ids that may be deleted.

    Returns:
        The predicate to hand to the entry deletion engine.

    Raises:
        ConfigurationError: If the selected list file cannot be read.
    """
    if ignore_list is not None:
        if remove_list is not None:
            logger.warning(
                f"Both an ignore list and a remove list were given; "
                f"using ignore list {ignore_list} and ignoring {remove_list}"
            )
        ids = load_id_list(ignore_list)
        logger.info(f"Ignoring {len(ids)} entries listed in {ignore_list}")
        return RecordFilter(FilterMode.IGNORE, ids)

    if remove_list is not None:
        ids = load_id_list(remove_list)
        logger.info(f"Restricting deletion to {len(ids)} entries listed in {remove_list}")
        return RecordFilter(FilterMode.REMOVE, ids)

    return RecordFilter()


__all__ = ["FilterMode", "RecordFilter", "build_filter", "load_id_list"]
