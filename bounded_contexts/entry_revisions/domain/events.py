"""リビジョンのライフサイクルイベント。"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from .entities import EntryDraft, EntryVersion


class RevisionEventKind(str, Enum):
    DRAFT_SAVED = "draftSaved"
    DRAFT_PUBLISHED = "draftPublished"
    BEFORE_DRAFT_DELETED = "beforeDraftDeleted"
    AFTER_DRAFT_DELETED = "afterDraftDeleted"
    VERSION_REVERTED = "versionReverted"


@dataclass(frozen=True)
class RevisionEvent:
    kind: RevisionEventKind
    draft: Optional[EntryDraft] = None
    version: Optional[EntryVersion] = None
    is_new_draft: Optional[bool] = None


class RevisionEventSink(Protocol):
    """イベントの送信先。戻り値は利用しない。"""

    def emit(self, event: RevisionEvent) -> None:  # pragma: no cover - プロトコル定義
        ...


__all__ = ["RevisionEvent", "RevisionEventKind", "RevisionEventSink"]
