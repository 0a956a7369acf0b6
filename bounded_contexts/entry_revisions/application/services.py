"""
Entry revision のアプリケーションサービス - ドラフト・バージョン・公開操作の窓口
"""

from __future__ import annotations

from typing import Any, List, Optional

from bounded_contexts.entry_revisions.application.drafts import EntryDraftService
from bounded_contexts.entry_revisions.application.events import RevisionEventDispatcher
from bounded_contexts.entry_revisions.application.promotion import EntryPromotionService
from bounded_contexts.entry_revisions.application.versions import EntryVersionService
from bounded_contexts.entry_revisions.domain.entities import EntryDraft, EntryVersion
from bounded_contexts.entry_revisions.domain.events import RevisionEventSink
from bounded_contexts.entry_revisions.domain.ports import (
    Actor,
    EntryPipeline,
    FieldRegistry,
    LocaleProvider,
    SectionProvider,
)
from bounded_contexts.entry_revisions.domain.snapshot import SnapshotCodec
from bounded_contexts.entry_revisions.infrastructure.locale import SettingsLocaleProvider
from bounded_contexts.entry_revisions.infrastructure.repositories import (
    EntryDraftRepository,
    EntryVersionRepository,
)


class EntryRevisionsService:
    """ドラフト・バージョン関連の操作をまとめたサービス"""

    def __init__(
        self,
        field_registry: FieldRegistry,
        pipeline: EntryPipeline,
        section_provider: SectionProvider,
        *,
        locale_provider: LocaleProvider | None = None,
        events: RevisionEventSink | None = None,
        draft_repo: EntryDraftRepository | None = None,
        version_repo: EntryVersionRepository | None = None,
    ) -> None:
        self.codec = SnapshotCodec(field_registry)
        self.locale_provider = locale_provider or SettingsLocaleProvider()
        self.events = events or RevisionEventDispatcher()
        self.drafts = EntryDraftService(
            self.codec,
            draft_repo=draft_repo,
            locale_provider=self.locale_provider,
            events=self.events,
        )
        self.versions = EntryVersionService(
            self.codec,
            version_repo=version_repo,
            locale_provider=self.locale_provider,
        )
        self.promotion = EntryPromotionService(
            pipeline,
            section_provider,
            self.drafts,
            events=self.events,
        )

    # ドラフト
    def get_draft_by_id(self, draft_id: int) -> Optional[EntryDraft]:
        return self.drafts.get_draft_by_id(draft_id)

    def get_draft_by_offset(self, entry_id: int, offset: int = 0) -> Optional[EntryDraft]:
        return self.drafts.get_draft_by_offset(entry_id, offset)

    def get_drafts_by_entry_id(self, entry_id: int, locale: Optional[str] = None) -> List[EntryDraft]:
        return self.drafts.get_drafts_by_entry_id(entry_id, locale)

    def get_editable_drafts_by_entry_id(
        self,
        entry_id: int,
        locale: Optional[str] = None,
        *,
        actor: Optional[Actor],
    ) -> List[EntryDraft]:
        return self.drafts.get_editable_drafts_by_entry_id(entry_id, locale, actor=actor)

    def save_draft(self, draft: EntryDraft) -> bool:
        return self.drafts.save_draft(draft)

    def publish_draft(self, draft: EntryDraft) -> bool:
        return self.promotion.publish_draft(draft)

    def delete_draft(self, draft: EntryDraft) -> None:
        self.drafts.delete_draft(draft)

    # バージョン
    def get_version_by_id(self, version_id: int) -> Optional[EntryVersion]:
        return self.versions.get_version_by_id(version_id)

    def get_version_by_offset(self, entry_id: int, offset: int = 0) -> Optional[EntryVersion]:
        return self.versions.get_version_by_offset(entry_id, offset)

    def get_versions_by_entry_id(
        self,
        entry_id: int,
        locale: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[EntryVersion]:
        return self.versions.get_versions_by_entry_id(entry_id, locale, limit)

    def save_version(self, entry: Any, *, actor: Optional[Actor] = None) -> bool:
        return self.versions.save_version(entry, actor=actor)

    def revert_entry_to_version(self, version: EntryVersion) -> bool:
        return self.promotion.revert_entry_to_version(version)


__all__ = ["EntryRevisionsService"]
