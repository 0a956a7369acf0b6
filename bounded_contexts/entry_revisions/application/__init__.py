"""Entry revision アプリケーション層。"""

from .drafts import EntryDraftService
from .events import RevisionEventDispatcher, RevisionEventHandler
from .promotion import EntryPromotionService
from .services import EntryRevisionsService
from .versions import EntryVersionService

__all__ = [
    "EntryDraftService",
    "EntryPromotionService",
    "EntryRevisionsService",
    "EntryVersionService",
    "RevisionEventDispatcher",
    "RevisionEventHandler",
]
