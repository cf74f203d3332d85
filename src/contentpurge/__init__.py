"""
ContentPurge - Bulk Deletion for Contentful Environments.

ContentPurge empties a Contentful environment: every entry (optionally scoped to
one content type or narrowed by an id list), the entries they own through
relation fields, and finally the content types themselves.

Key Features:
- Pagination that corrects for records disappearing under the cursor
- Children deleted before their parent, with a cycle guard
- Live entries left alone by default
- One failing record never aborts the run
- Protocol-based gateway (swap the backend for tests without code changes)

Quick Start:
    >>> from contentpurge import ContentPurge, ContentfulGateway, AutoConfirmPrompt
    >>> gateway = ContentfulGateway("space-id", "CFPAT-...", "staging")
    >>> purge = ContentPurge(gateway, AutoConfirmPrompt(), space_id="space-id", environment="staging")
    >>> result = await purge.run(delete_content_types=True)

Architecture:
    Gateways: ContentfulGateway, MemoryGateway
    Engines: EntryDeletionEngine, SchemaDeletionEngine
    Reporters: RichProgressReporter, SimpleProgressReporter
"""

# Core orchestration
from contentpurge.core.config import Settings, get_settings
from contentpurge.core.exceptions import (
    ConfigurationError,
    ConflictError,
    ContentPurgeError,
    GatewayError,
    NotFoundError,
)
from contentpurge.core.purge import ContentPurge, RunResult

# Engines
from contentpurge.engine import EntryDeletionEngine, PageCursor, PublishPolicy, SchemaDeletionEngine

# Gateways
from contentpurge.gateway import ContentfulGateway, MemoryGateway

# Models
from contentpurge.models import ContentType, DeletionSummary, Entry, Page, PublishState

# Prompts
from contentpurge.prompt import AutoConfirmPrompt, RichConfirmPrompt

# Protocols
from contentpurge.protocols import (
    CallbackProgressReporter,
    ConfirmationPrompt,
    NullProgressReporter,
    ProgressReporter,
    RecordGateway,
)

# Selection and relations
from contentpurge.relations import RelationResolver

# Progress reporter implementations
from contentpurge.reporter import RichProgressReporter, SimpleProgressReporter
from contentpurge.selection import FilterMode, RecordFilter, build_filter, load_id_list

__version__ = "0.1.0"

__all__ = [
    # Orchestration
    "ContentPurge",
    "RunResult",
    # Configuration
    "Settings",
    "get_settings",
    # Errors
    "ContentPurgeError",
    "ConfigurationError",
    "GatewayError",
    "NotFoundError",
    "ConflictError",
    # Engines
    "EntryDeletionEngine",
    "SchemaDeletionEngine",
    "PageCursor",
    "PublishPolicy",
    # Gateways
    "RecordGateway",
    "ContentfulGateway",
    "MemoryGateway",
    # Models
    "Entry",
    "ContentType",
    "Page",
    "PublishState",
    "DeletionSummary",
    # Selection and relations
    "FilterMode",
    "RecordFilter",
    "build_filter",
    "load_id_list",
    "RelationResolver",
    # Progress
    "ProgressReporter",
    "NullProgressReporter",
    "CallbackProgressReporter",
    "RichProgressReporter",
    "SimpleProgressReporter",
    # Prompts
    "ConfirmationPrompt",
    "RichConfirmPrompt",
    "AutoConfirmPrompt",
]
