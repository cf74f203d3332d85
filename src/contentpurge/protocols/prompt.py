"""Confirmation prompt protocol.

Every destructive pass is gated by one ``confirm`` call unless the run was
started with ``--yes``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConfirmationPrompt(Protocol):
    """Asks the operator a yes/no question."""

    def confirm(self, message: str) -> bool:
        """Return True to go ahead, False to stop before deleting anything."""
        ...
