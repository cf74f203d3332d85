"""Owned-record discovery through reference fields.

Some entries own other entries: a series lists its episodes, an episode its
segments. Those references live in a fixed set of relation fields and have to
be deleted before the owner, otherwise the backend keeps orphaned records.

Field values are localized, and each locale may hold a single link or a list
of links:

    {"episodeMembership": {"en-US": [{"sys": {"type": "Link", "linkType": "Entry", "id": "ep-1"}}]}}

Example:
    >>> from contentpurge.models import Entry
    >>> from contentpurge.relations import RelationResolver
    >>> link = lambda i: {"sys": {"type": "Link", "linkType": "Entry", "id": i}}
    >>> series = Entry(id="s1", fields={"episodeMembership": {"en-US": [link("e1"), link("e2")]}})
    >>> RelationResolver().relations(series)
    [('episodeMembership', ['e1', 'e2'])]
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from contentpurge.core.config import DEFAULT_RELATION_FIELDS
from contentpurge.models import Entry


def _link_id(value: Any) -> str | None:
    """Return the target id of an entry link, None for anything else."""
    if not isinstance(value, dict):
        return None
    sys = value.get("sys")
    if not isinstance(sys, dict) or sys.get("type") != "Link":
        return None
    if sys.get("linkType", "Entry") != "Entry":
        return None
    target = sys.get("id")
    return target if isinstance(target, str) and target else None


def _iter_links(value: Any) -> Iterator[str]:
    if isinstance(value, list):
        for item in value:
            target = _link_id(item)
            if target:
                yield target
    else:
        target = _link_id(value)
        if target:
            yield target


class RelationResolver:
    """Finds the child entries an entry owns.

    Args:
        fields: Relation field names, in the order their children are deleted.

    Example:
        >>> resolver = RelationResolver(fields=["parts"])
        >>> resolver.fields
        ('parts',)
    """

    def __init__(self, fields: Iterable[str] = DEFAULT_RELATION_FIELDS) -> None:
        self._fields = tuple(fields)

    @property
    def fields(self) -> tuple[str, ...]:
        return self._fields

    def child_ids(self, entry: Entry, field: str) -> list[str]:
        """Ordered, de-duplicated ids referenced by one field across all locales.

        Example:
            >>> from contentpurge.models import Entry
            >>> link = {"sys": {"type": "Link", "linkType": "Entry", "id": "e1"}}
            >>> entry = Entry(id="s1", fields={"seriesMembership": {"en-US": link, "de-DE": [link]}})
            >>> RelationResolver().child_ids(entry, "seriesMembership")
            ['e1']
            >>> RelationResolver().child_ids(entry, "missing")
            []
        """
        value = entry.fields.get(field)
        if value is None:
            return []

        # Unlocalized payloads carry the value directly
        if isinstance(value, dict) and "sys" not in value:
            per_locale = list(value.values())
        else:
            per_locale = [value]

        seen: set[str] = set()
        ids: list[str] = []
        for locale_value in per_locale:
            for target in _iter_links(locale_value):
                if target not in seen:
                    seen.add(target)
                    ids.append(target)
        return ids

    def relations(self, entry: Entry) -> list[tuple[str, list[str]]]:
        """Child ids per relation field present on the entry."""
        found = []
        for field in self._fields:
            if field in entry.fields:
                found.append((field, self.child_ids(entry, field)))
        return found


__all__ = ["RelationResolver"]
