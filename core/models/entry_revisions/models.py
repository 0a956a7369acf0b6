"""エントリーのドラフト・バージョン履歴のSQLAlchemyモデル."""
from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column

from core.db import BigInt, db
from core.time import utc_now


class EntryDraftRecord(db.Model):
    """エントリーに紐づく名前付きドラフト"""

    __tablename__ = "entrydrafts"
    __table_args__ = (
        db.Index("ix_entrydrafts_entry_locale", "entry_id", "locale"),
    )

    id: Mapped[int] = mapped_column(BigInt, primary_key=True, autoincrement=True)

    # エントリー・セクション・ユーザーはホストアプリケーション側のテーブル
    entry_id: Mapped[int] = mapped_column(BigInt, nullable=False)
    section_id: Mapped[int] = mapped_column(BigInt, nullable=False, index=True)
    creator_id: Mapped[int] = mapped_column(BigInt, nullable=False, index=True)
    locale: Mapped[str] = mapped_column(db.String(12), nullable=False)

    name: Mapped[str] = mapped_column(db.String(255), nullable=False)
    notes: Mapped[str | None] = mapped_column(db.Text, nullable=True)
    data: Mapped[str] = mapped_column(db.Text, nullable=False)

    # タイムスタンプ
    created_at: Mapped[datetime] = mapped_column(
        db.DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        db.DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
    )

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<EntryDraftRecord {self.entry_id}/{self.locale} {self.name!r}>"


class EntryVersionRecord(db.Model):
    """エントリー保存ごとに追加される不変のバージョン"""

    __tablename__ = "entryversions"
    __table_args__ = (
        db.Index("ix_entryversions_entry_locale", "entry_id", "locale"),
    )

    id: Mapped[int] = mapped_column(BigInt, primary_key=True, autoincrement=True)
    entry_id: Mapped[int] = mapped_column(BigInt, nullable=False)
    section_id: Mapped[int] = mapped_column(BigInt, nullable=False, index=True)
    creator_id: Mapped[int | None] = mapped_column(BigInt, nullable=True, index=True)
    locale: Mapped[str] = mapped_column(db.String(12), nullable=False)

    num: Mapped[int] = mapped_column(db.Integer, nullable=False)
    notes: Mapped[str | None] = mapped_column(db.Text, nullable=True)
    data: Mapped[str] = mapped_column(db.Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        db.DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        db.DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"<EntryVersionRecord {self.entry_id}/{self.locale} v{self.num}>"


__all__ = ["EntryDraftRecord", "EntryVersionRecord"]
