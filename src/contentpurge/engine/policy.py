"""Publish-state policy for entry deletion.

Two behaviours have been used in production and they disagree on live
entries, so the choice is explicit:

- ``skip-live`` (default): entries that are published and unmodified are left
  in place. Drafts and changed entries are deleted directly.
- ``unpublish``: every published entry, changed or not, is unpublished and
  then deleted.

Example:
    >>> from contentpurge.engine.policy import PublishPolicy
    >>> from contentpurge.models import Entry
    >>> live = Entry(id="a", version=4, published_version=3)
    >>> PublishPolicy.SKIP_LIVE.skips(live), PublishPolicy.UNPUBLISH.skips(live)
    (True, False)
    >>> PublishPolicy.UNPUBLISH.unpublishes(live)
    True
"""

from __future__ import annotations

from enum import Enum

from contentpurge.models import Entry, PublishState


class PublishPolicy(str, Enum):
    """What to do with an entry depending on its publish state."""

    SKIP_LIVE = "skip-live"
    UNPUBLISH = "unpublish"

    def skips(self, entry: Entry) -> bool:
        """True if the entry must not be deleted at all."""
        return self is PublishPolicy.SKIP_LIVE and entry.publish_state is PublishState.PUBLISHED

    def unpublishes(self, entry: Entry) -> bool:
        """True if the entry has to be unpublished before the delete call."""
        return self is PublishPolicy.UNPUBLISH and entry.is_published


__all__ = ["PublishPolicy"]
