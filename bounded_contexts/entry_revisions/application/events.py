"""リビジョンイベントをプロセス内の購読者へ配信するディスパッチャ。"""

from __future__ import annotations

from collections import defaultdict
from typing import Callable, DefaultDict, List

from core.logging_config import get_revision_logger, log_revision_info
from bounded_contexts.entry_revisions.domain.events import RevisionEvent, RevisionEventKind


RevisionEventHandler = Callable[[RevisionEvent], None]

logger = get_revision_logger("events")


class RevisionEventDispatcher:
    """イベント種別ごとの購読者を登録順に同期呼び出しする"""

    def __init__(self) -> None:
        self._subscribers: DefaultDict[RevisionEventKind, List[RevisionEventHandler]] = defaultdict(list)

    def subscribe(self, kind: RevisionEventKind, handler: RevisionEventHandler) -> None:
        self._subscribers[kind].append(handler)

    def unsubscribe(self, kind: RevisionEventKind, handler: RevisionEventHandler) -> None:
        handlers = self._subscribers.get(kind)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def emit(self, event: RevisionEvent) -> None:
        draft = event.draft
        version = event.version
        source = draft or version
        log_revision_info(
            logger,
            f"Revision event {event.kind.value}",
            f"event.{event.kind.value}",
            entry_id=source.entry_id if source else None,
            draft_id=draft.draft_id if draft else None,
            version_id=version.version_id if version else None,
        )

        for handler in list(self._subscribers.get(event.kind, ())):
            handler(event)


__all__ = ["RevisionEventDispatcher", "RevisionEventHandler"]
