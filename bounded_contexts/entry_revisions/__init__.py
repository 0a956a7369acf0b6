# Entry revisions bounded context root
from .application import EntryRevisionsService
from .domain import EntryDraft, EntryVersion, LiveEntry, RevisionEventKind

__all__ = ["EntryDraft", "EntryRevisionsService", "EntryVersion", "LiveEntry", "RevisionEventKind"]
