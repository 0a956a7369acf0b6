"""
Entry revision のリポジトリ実装 - データアクセス層
"""

from __future__ import annotations

from typing import Dict, List, Optional

from sqlalchemy import asc, desc, inspect
from sqlalchemy.exc import SQLAlchemyError

from core.db import db
from core.logging_config import get_revision_logger, log_revision_error
from core.models.entry_revisions.models import EntryDraftRecord, EntryVersionRecord


logger = get_revision_logger("repositories")

_MAX_NAME_LENGTH = 255
_MAX_LOCALE_LENGTH = 12


def _required(errors: Dict[str, List[str]], record: object, *attributes: str) -> None:
    for attribute in attributes:
        value = getattr(record, attribute, None)
        if value is None or (isinstance(value, str) and not value.strip()):
            errors.setdefault(attribute, []).append(f"{attribute} cannot be blank.")


def _max_length(errors: Dict[str, List[str]], attribute: str, value: Optional[str], limit: int) -> None:
    if value is not None and len(value) > limit:
        errors.setdefault(attribute, []).append(
            f"{attribute} should contain at most {limit} characters."
        )


def _commit(record: object, event: str, **context: object) -> bool:
    """コミットを試行し、失敗時はロールバックしてログを記録"""
    try:
        db.session.add(record)
        db.session.commit()
        return True
    except SQLAlchemyError as exc:
        db.session.rollback()
        log_revision_error(
            logger,
            f"リビジョンの保存中にエラーが発生: {exc}",
            event,
            error_type=type(exc).__name__,
            **context,
        )
        return False


class EntryDraftRepository:
    """ドラフトのデータアクセス"""

    def find_by_id(self, draft_id: int) -> Optional[EntryDraftRecord]:
        """IDでドラフトを検索"""
        return db.session.get(EntryDraftRecord, draft_id)

    def find_by_entry(self, entry_id: int, locale: str) -> List[EntryDraftRecord]:
        """エントリー・ロケールのドラフトを名前順で取得"""
        return (EntryDraftRecord.query
                .filter_by(entry_id=entry_id, locale=locale)
                .order_by(asc(EntryDraftRecord.name), asc(EntryDraftRecord.id))
                .all())

    def find_by_entry_offset(self, entry_id: int, locale: str, offset: int = 0) -> Optional[EntryDraftRecord]:
        return (EntryDraftRecord.query
                .filter_by(entry_id=entry_id, locale=locale)
                .order_by(asc(EntryDraftRecord.id))
                .offset(offset)
                .first())

    def count_by_entry(self, entry_id: int, locale: str) -> int:
        """エントリー・ロケールのドラフト数をカウント"""
        return EntryDraftRecord.query.filter_by(entry_id=entry_id, locale=locale).count()

    def validate(self, record: EntryDraftRecord) -> Dict[str, List[str]]:
        errors: Dict[str, List[str]] = {}
        _required(errors, record, "entry_id", "section_id", "creator_id", "locale", "name", "data")
        _max_length(errors, "name", record.name, _MAX_NAME_LENGTH)
        _max_length(errors, "locale", record.locale, _MAX_LOCALE_LENGTH)
        return errors

    def discard_changes(self, record: EntryDraftRecord) -> None:
        """未コミットの変更を破棄"""
        if inspect(record).persistent:
            db.session.expire(record)

    def save(self, record: EntryDraftRecord) -> bool:
        """ドラフトを保存"""
        return _commit(
            record,
            "draft.save_failed",
            entry_id=record.entry_id,
            locale=record.locale,
        )

    def delete(self, record: EntryDraftRecord) -> bool:
        """ドラフトを削除。未保存のレコードは何もしない"""
        if not inspect(record).persistent:
            return False
        db.session.delete(record)
        db.session.commit()
        return True


class EntryVersionRepository:
    """バージョン履歴のデータアクセス"""

    def find_by_id(self, version_id: int) -> Optional[EntryVersionRecord]:
        """IDでバージョンを検索"""
        return db.session.get(EntryVersionRecord, version_id)

    def find_by_entry(
        self,
        entry_id: int,
        locale: str,
        *,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> List[EntryVersionRecord]:
        """エントリー・ロケールのバージョンを新しい順で取得"""
        query = (EntryVersionRecord.query
                 .filter_by(entry_id=entry_id, locale=locale)
                 .order_by(desc(EntryVersionRecord.created_at), desc(EntryVersionRecord.id))
                 .offset(offset))
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def count_by_entry(self, entry_id: int, locale: str) -> int:
        """エントリー・ロケールのバージョン数をカウント"""
        return EntryVersionRecord.query.filter_by(entry_id=entry_id, locale=locale).count()

    def validate(self, record: EntryVersionRecord) -> Dict[str, List[str]]:
        errors: Dict[str, List[str]] = {}
        _required(errors, record, "entry_id", "section_id", "locale", "num", "data")
        _max_length(errors, "locale", record.locale, _MAX_LOCALE_LENGTH)
        return errors

    def save(self, record: EntryVersionRecord) -> bool:
        """バージョンを追加"""
        return _commit(
            record,
            "version.save_failed",
            entry_id=record.entry_id,
            locale=record.locale,
            version_num=record.num,
        )


__all__ = ["EntryDraftRepository", "EntryVersionRepository"]
