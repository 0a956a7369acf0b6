"""バージョン履歴のアプリケーションサービス"""

from __future__ import annotations

from typing import Any, List, Optional

from core.logging_config import get_revision_logger, log_revision_info, log_revision_warning
from core.models.entry_revisions.models import EntryVersionRecord
from core.settings import ApplicationSettings, settings as default_settings
from bounded_contexts.entry_revisions.domain.entities import EntryVersion
from bounded_contexts.entry_revisions.domain.exceptions import RevisionValidationError
from bounded_contexts.entry_revisions.domain.ports import Actor, LocaleProvider
from bounded_contexts.entry_revisions.domain.snapshot import SnapshotCodec
from bounded_contexts.entry_revisions.infrastructure.locale import SettingsLocaleProvider
from bounded_contexts.entry_revisions.infrastructure.repositories import EntryVersionRepository


logger = get_revision_logger("versions")


class EntryVersionService:
    """追記専用のバージョン履歴を扱う。更新・削除の操作は持たない。"""

    def __init__(
        self,
        codec: SnapshotCodec,
        *,
        version_repo: EntryVersionRepository | None = None,
        locale_provider: LocaleProvider | None = None,
        app_settings: ApplicationSettings | None = None,
    ) -> None:
        self.codec = codec
        self.version_repo = version_repo or EntryVersionRepository()
        self.locale_provider = locale_provider or SettingsLocaleProvider()
        self.settings = app_settings or default_settings

    def get_version_by_id(self, version_id: int) -> Optional[EntryVersion]:
        """IDでバージョンを取得"""
        record = self.version_repo.find_by_id(version_id)
        if record is None:
            return None
        return self._to_model(record, include_fields=True)

    def get_version_by_offset(self, entry_id: int, offset: int = 0) -> Optional[EntryVersion]:
        """プライマリロケールのバージョンを新しい順のオフセットで取得（非推奨）

        以前の実装は ``offset`` を無視して最初に見つかったバージョンを返していたが、
        ここでは新しい順に数えた ``offset`` 番目を返す。
        """
        log_revision_warning(
            logger,
            "get_version_by_offset() has been deprecated.",
            "deprecated",
            method="get_version_by_offset",
        )

        records = self.version_repo.find_by_entry(
            entry_id,
            self.locale_provider.primary_locale(),
            offset=offset,
            limit=1,
        )
        if not records:
            return None
        return self._to_model(records[0], include_fields=True)

    def get_versions_by_entry_id(
        self,
        entry_id: int,
        locale: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[EntryVersion]:
        """履歴表示用のバージョン一覧。

        最新のバージョンは現在の内容とみなして除外し、残りを新しい順で返す。
        フィールド値は読み込まない。
        """
        locale = locale or self.locale_provider.primary_locale()
        if limit is None:
            limit = self.settings.entry_revisions_history_limit

        records = self.version_repo.find_by_entry(entry_id, locale, offset=1, limit=limit)
        return [self._to_model(record, include_fields=False) for record in records]

    def save_version(self, entry: Any, *, actor: Optional[Actor] = None) -> bool:
        """エントリー保存時に新しいバージョンを追加する。

        ``entry`` はライブエントリーと同じ属性を持つオブジェクト。
        作成者は操作ユーザー、いなければエントリーの著者になる。
        """
        if getattr(entry, "id", None) is None:
            raise RevisionValidationError("Cannot create a version of an unsaved entry")

        # 同じエントリー・ロケールの既存バージョン数 + 1
        total_versions = self.version_repo.count_by_entry(entry.id, entry.locale)

        record = EntryVersionRecord(
            entry_id=entry.id,
            section_id=entry.section_id,
            creator_id=actor.id if actor is not None else entry.author_id,
            locale=entry.locale,
            num=total_versions + 1,
            data=self.codec.encode(entry),
            notes=getattr(entry, "revision_notes", None),
        )

        errors = self.version_repo.validate(record)
        if errors:
            add_error = getattr(entry, "add_error", None)
            if callable(add_error):
                for attribute, messages in errors.items():
                    for message in messages:
                        add_error(attribute, message)
            log_revision_warning(
                logger,
                "バージョンの検証に失敗しました",
                "version.invalid",
                entry_id=entry.id,
                locale=entry.locale,
                errors=errors,
            )
            return False

        if not self.version_repo.save(record):
            return False

        log_revision_info(
            logger,
            f"バージョン {record.num} を保存しました",
            "version.saved",
            entry_id=record.entry_id,
            version_id=record.id,
            version_num=record.num,
            locale=record.locale,
        )
        return True

    def _to_model(self, record: EntryVersionRecord, *, include_fields: bool) -> EntryVersion:
        snapshot = self.codec.decode(record.data, include_fields=include_fields)
        version = EntryVersion(
            entry_id=record.entry_id,
            section_id=record.section_id,
            locale=record.locale,
            creator_id=record.creator_id,
            revision_notes=record.notes,
            date_created=record.created_at,
            version_id=record.id,
            num=record.num,
        )
        version.apply_snapshot(snapshot, self.codec.field_values_by_handle(snapshot))
        return version


__all__ = ["EntryVersionService"]
