"""ドラフトのアプリケーションサービス - 取得・保存・削除"""

from __future__ import annotations

from typing import List, Optional

from flask_babel import gettext as _

from core.logging_config import get_revision_logger, log_revision_info, log_revision_warning
from core.models.entry_revisions.models import EntryDraftRecord
from bounded_contexts.entry_revisions.application.events import RevisionEventDispatcher
from bounded_contexts.entry_revisions.domain.entities import EntryDraft
from bounded_contexts.entry_revisions.domain.events import (
    RevisionEvent,
    RevisionEventKind,
    RevisionEventSink,
)
from bounded_contexts.entry_revisions.domain.exceptions import DraftNotFoundError
from bounded_contexts.entry_revisions.domain.permissions import DraftPermissionService
from bounded_contexts.entry_revisions.domain.ports import Actor, LocaleProvider
from bounded_contexts.entry_revisions.domain.snapshot import SnapshotCodec
from bounded_contexts.entry_revisions.infrastructure.locale import SettingsLocaleProvider
from bounded_contexts.entry_revisions.infrastructure.repositories import EntryDraftRepository


logger = get_revision_logger("drafts")


class EntryDraftService:
    """ドラフト関連のビジネスロジック"""

    def __init__(
        self,
        codec: SnapshotCodec,
        *,
        draft_repo: EntryDraftRepository | None = None,
        locale_provider: LocaleProvider | None = None,
        events: RevisionEventSink | None = None,
        permission_service: DraftPermissionService | None = None,
    ) -> None:
        self.codec = codec
        self.draft_repo = draft_repo or EntryDraftRepository()
        self.locale_provider = locale_provider or SettingsLocaleProvider()
        self.events = events or RevisionEventDispatcher()
        self.permission_service = permission_service or DraftPermissionService()

    # ------------------------------------------------------------------
    # 取得
    # ------------------------------------------------------------------
    def get_draft_by_id(self, draft_id: int) -> Optional[EntryDraft]:
        """IDでドラフトを取得"""
        record = self.draft_repo.find_by_id(draft_id)
        if record is None:
            return None
        return self._to_model(record, include_fields=True)

    def get_draft_by_offset(self, entry_id: int, offset: int = 0) -> Optional[EntryDraft]:
        """プライマリロケールのドラフトをオフセット指定で取得（非推奨）"""
        log_revision_warning(
            logger,
            "get_draft_by_offset() has been deprecated.",
            "deprecated",
            method="get_draft_by_offset",
        )

        record = self.draft_repo.find_by_entry_offset(
            entry_id, self.locale_provider.primary_locale(), offset
        )
        if record is None:
            return None
        return self._to_model(record, include_fields=True)

    def get_drafts_by_entry_id(self, entry_id: int, locale: Optional[str] = None) -> List[EntryDraft]:
        """エントリーのドラフト一覧を名前順で取得。フィールド値は読み込まない"""
        locale = locale or self.locale_provider.primary_locale()
        records = self.draft_repo.find_by_entry(entry_id, locale)
        return [self._to_model(record, include_fields=False) for record in records]

    def get_editable_drafts_by_entry_id(
        self,
        entry_id: int,
        locale: Optional[str] = None,
        *,
        actor: Optional[Actor],
    ) -> List[EntryDraft]:
        """指定ユーザーが編集できるドラフトのみを取得"""
        if actor is None:
            return []

        drafts = self.get_drafts_by_entry_id(entry_id, locale)
        return self.permission_service.filter_editable(drafts, actor)

    # ------------------------------------------------------------------
    # 保存・削除
    # ------------------------------------------------------------------
    def save_draft(self, draft: EntryDraft) -> bool:
        """ドラフトを保存。検証・永続化に失敗した場合は ``False`` を返す"""
        record = self._get_draft_record(draft)
        draft.errors = {}

        if not draft.name and draft.entry_id:
            # 同じエントリー・ロケールの既存ドラフト数から名前を決める
            total_drafts = self.draft_repo.count_by_entry(draft.entry_id, draft.locale)
            draft.name = _("Draft %(num)s", num=total_drafts + 1)

        record.name = draft.name
        record.notes = draft.revision_notes
        record.data = self.codec.encode(draft)

        is_new_draft = draft.is_new

        errors = self.draft_repo.validate(record)
        if errors:
            for attribute, messages in errors.items():
                for message in messages:
                    draft.add_error(attribute, message)
            log_revision_warning(
                logger,
                "ドラフトの検証に失敗しました",
                "draft.invalid",
                entry_id=draft.entry_id,
                locale=draft.locale,
                errors=errors,
            )
            self.draft_repo.discard_changes(record)
            return False

        if not self.draft_repo.save(record):
            draft.add_error("draft", _("Couldn’t save draft."))
            return False

        draft.draft_id = record.id
        draft.date_created = record.created_at

        log_revision_info(
            logger,
            f"ドラフトを保存しました: {draft.name}",
            "draft.saved",
            entry_id=draft.entry_id,
            draft_id=draft.draft_id,
            locale=draft.locale,
            is_new_draft=is_new_draft,
        )

        self.events.emit(RevisionEvent(
            kind=RevisionEventKind.DRAFT_SAVED,
            draft=draft,
            is_new_draft=is_new_draft,
        ))
        return True

    def delete_draft(self, draft: EntryDraft) -> None:
        """ドラフトを削除"""
        record = self._get_draft_record(draft)

        self.events.emit(RevisionEvent(kind=RevisionEventKind.BEFORE_DRAFT_DELETED, draft=draft))

        if self.draft_repo.delete(record):
            log_revision_info(
                logger,
                f"ドラフトを削除しました: {draft.name}",
                "draft.deleted",
                entry_id=draft.entry_id,
                draft_id=draft.draft_id,
                locale=draft.locale,
            )

        self.events.emit(RevisionEvent(kind=RevisionEventKind.AFTER_DRAFT_DELETED, draft=draft))

    # ------------------------------------------------------------------
    # 内部処理
    # ------------------------------------------------------------------
    def _get_draft_record(self, draft: EntryDraft) -> EntryDraftRecord:
        """ドラフトに対応するレコードを返す。IDがあるのに見つからない場合は例外"""
        if draft.draft_id:
            record = self.draft_repo.find_by_id(draft.draft_id)
            if record is None:
                raise DraftNotFoundError(draft.draft_id)
            return record

        return EntryDraftRecord(
            entry_id=draft.entry_id,
            section_id=draft.section_id,
            creator_id=draft.creator_id,
            locale=draft.locale,
        )

    def _to_model(self, record: EntryDraftRecord, *, include_fields: bool) -> EntryDraft:
        snapshot = self.codec.decode(record.data, include_fields=include_fields)
        draft = EntryDraft(
            entry_id=record.entry_id,
            section_id=record.section_id,
            locale=record.locale,
            creator_id=record.creator_id,
            revision_notes=record.notes,
            date_created=record.created_at,
            draft_id=record.id,
            name=record.name,
        )
        draft.apply_snapshot(snapshot, self.codec.field_values_by_handle(snapshot))
        return draft


__all__ = ["EntryDraftService"]
