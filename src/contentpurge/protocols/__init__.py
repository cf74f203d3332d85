"""Protocol definitions - all extension points."""

from contentpurge.protocols.gateway import RecordGateway
from contentpurge.protocols.progress import (
    CallbackProgressReporter,
    NullProgressReporter,
    ProgressReporter,
)
from contentpurge.protocols.prompt import ConfirmationPrompt

__all__ = [
    # Gateway
    "RecordGateway",
    # Progress
    "ProgressReporter",
    "NullProgressReporter",
    "CallbackProgressReporter",
    # Prompt
    "ConfirmationPrompt",
]
