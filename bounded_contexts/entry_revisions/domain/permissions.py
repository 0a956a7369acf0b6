"""ドラフトに対する編集権限を判定するドメインサービス。"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .entities import EntryDraft
from .ports import Actor


EDIT_PEER_ENTRY_DRAFTS = "editPeerEntryDrafts"


def peer_drafts_permission(section_id: int) -> str:
    """セクション単位の他ユーザードラフト編集権限名を返す"""

    return f"{EDIT_PEER_ENTRY_DRAFTS}:{section_id}"


class DraftPermissionService:
    """ドラフトの編集可否を判定する。"""

    def can_edit(self, draft: EntryDraft, actor: Optional[Actor]) -> bool:
        """作成者本人、またはセクションの他者ドラフト編集権限を持つユーザーのみ編集できる"""

        if actor is None:
            return False

        if draft.creator_id is not None and draft.creator_id == actor.id:
            return True

        return bool(actor.can(peer_drafts_permission(draft.section_id)))

    def filter_editable(self, drafts: Iterable[EntryDraft], actor: Optional[Actor]) -> List[EntryDraft]:
        if actor is None:
            return []
        return [draft for draft in drafts if self.can_edit(draft, actor)]


__all__ = ["DraftPermissionService", "EDIT_PEER_ENTRY_DRAFTS", "peer_drafts_permission"]
