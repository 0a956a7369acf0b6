"""Entry revision ドメインモジュール。"""

from .entities import (
    EntryDraft,
    EntryRevision,
    EntryVersion,
    LiveEntry,
    Section,
    SectionType,
    Snapshot,
)
from .events import RevisionEvent, RevisionEventKind, RevisionEventSink
from .exceptions import (
    DraftNotFoundError,
    EntryRevisionError,
    RevisionValidationError,
    SectionNotFoundError,
    SnapshotDecodeError,
)
from .permissions import DraftPermissionService, EDIT_PEER_ENTRY_DRAFTS, peer_drafts_permission
from .ports import (
    Actor,
    EntryPipeline,
    FieldDefinition,
    FieldRegistry,
    LocaleProvider,
    RevisionSource,
    SectionProvider,
)
from .snapshot import SnapshotCodec

__all__ = [
    "Actor",
    "DraftNotFoundError",
    "DraftPermissionService",
    "EDIT_PEER_ENTRY_DRAFTS",
    "EntryDraft",
    "EntryPipeline",
    "EntryRevision",
    "EntryRevisionError",
    "EntryVersion",
    "FieldDefinition",
    "FieldRegistry",
    "LiveEntry",
    "LocaleProvider",
    "RevisionEvent",
    "RevisionEventKind",
    "RevisionEventSink",
    "RevisionSource",
    "RevisionValidationError",
    "Section",
    "SectionNotFoundError",
    "SectionProvider",
    "SectionType",
    "Snapshot",
    "SnapshotCodec",
    "SnapshotDecodeError",
    "peer_drafts_permission",
]
