"""ドラフトの公開・バージョンへの差し戻しを行うアプリケーションサービス。

どちらの操作もライブエントリーを直接書き換えず、エントリーパイプラインに保存を委ねる。
パイプラインは保存成功時に新しいバージョンを追加するため、差し戻しでも履歴は増える。
"""

from __future__ import annotations

from typing import Optional

from flask_babel import gettext as _

from core.logging_config import get_revision_logger, log_revision_info, log_revision_warning
from bounded_contexts.entry_revisions.application.drafts import EntryDraftService
from bounded_contexts.entry_revisions.domain.entities import (
    EntryDraft,
    EntryRevision,
    EntryVersion,
    LiveEntry,
    Section,
)
from bounded_contexts.entry_revisions.domain.events import (
    RevisionEvent,
    RevisionEventKind,
    RevisionEventSink,
)
from bounded_contexts.entry_revisions.domain.exceptions import SectionNotFoundError
from bounded_contexts.entry_revisions.domain.ports import EntryPipeline, SectionProvider


logger = get_revision_logger("promotion")


class EntryPromotionService:
    """ドラフト・バージョンの内容をライブエントリーへ反映する"""

    def __init__(
        self,
        pipeline: EntryPipeline,
        section_provider: SectionProvider,
        draft_service: EntryDraftService,
        *,
        events: Optional[RevisionEventSink] = None,
    ) -> None:
        self.pipeline = pipeline
        self.section_provider = section_provider
        self.draft_service = draft_service
        self.events = events or draft_service.events

    def publish_draft(self, draft: EntryDraft) -> bool:
        """ドラフトを公開する。成功時のみドラフトを削除する"""
        self._apply_single_title(draft)

        if not draft.revision_notes:
            draft.revision_notes = _("Published draft “%(name)s”.", name=draft.name)

        entry = self._save_entry(draft)
        if entry is None:
            log_revision_warning(
                logger,
                f"ドラフトの公開に失敗しました: {draft.name}",
                "draft.publish_failed",
                entry_id=draft.entry_id,
                draft_id=draft.draft_id,
                locale=draft.locale,
            )
            return False

        self.events.emit(RevisionEvent(kind=RevisionEventKind.DRAFT_PUBLISHED, draft=draft))
        log_revision_info(
            logger,
            f"ドラフトを公開しました: {draft.name}",
            "draft.published",
            entry_id=draft.entry_id,
            draft_id=draft.draft_id,
            locale=draft.locale,
        )

        self.draft_service.delete_draft(draft)
        return True

    def revert_entry_to_version(self, version: EntryVersion) -> bool:
        """エントリーを指定バージョンの内容に戻す。バージョン自体は変更しない"""
        self._apply_single_title(version)

        # 呼び出し側のメモは使わない
        version.revision_notes = _("Reverted version %(num)s.", num=version.num)

        entry = self._save_entry(version)
        if entry is None:
            log_revision_warning(
                logger,
                f"バージョン {version.num} への差し戻しに失敗しました",
                "version.revert_failed",
                entry_id=version.entry_id,
                version_id=version.version_id,
                locale=version.locale,
            )
            return False

        self.events.emit(RevisionEvent(kind=RevisionEventKind.VERSION_REVERTED, version=version))
        log_revision_info(
            logger,
            f"バージョン {version.num} に差し戻しました",
            "version.reverted",
            entry_id=version.entry_id,
            version_id=version.version_id,
            locale=version.locale,
        )
        return True

    # ------------------------------------------------------------------
    # 内部処理
    # ------------------------------------------------------------------
    def _get_section(self, revision: EntryRevision) -> Section:
        section = self.section_provider.get_section_by_id(revision.section_id)
        if section is None:
            raise SectionNotFoundError(revision.section_id)
        return section

    def _apply_single_title(self, revision: EntryRevision) -> None:
        # シングルはタイトルを持たないためセクション名を使う
        section = self._get_section(revision)
        if section.is_single:
            revision.title = section.name

    def _save_entry(self, revision: EntryRevision) -> Optional[LiveEntry]:
        """ライブエントリーを組み立ててパイプラインに保存させる。失敗時はエラーを書き戻す"""
        revision.errors = {}
        entry = revision.to_live_entry()
        if self.pipeline.save_entry(entry):
            return entry

        for attribute, messages in entry.errors.items():
            for message in messages:
                revision.add_error(attribute, message)
        return None


__all__ = ["EntryPromotionService"]
