"""Confirmation prompts.

Example:
    >>> from contentpurge.prompt import AutoConfirmPrompt
    >>> AutoConfirmPrompt().confirm("Delete everything?")
    True
"""

from __future__ import annotations

from rich.console import Console
from rich.prompt import Confirm


class RichConfirmPrompt:
    """Interactive yes/no question on the terminal. Defaults to no."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console

    def confirm(self, message: str) -> bool:
        return Confirm.ask(f"[bold white]{message}[/]", default=False, console=self._console)


class AutoConfirmPrompt:
    """Answers every question with yes (``--yes``)."""

    def confirm(self, message: str) -> bool:
        return True


__all__ = ["RichConfirmPrompt", "AutoConfirmPrompt"]
