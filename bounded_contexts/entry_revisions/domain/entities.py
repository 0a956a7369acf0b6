"""
Entry revision domain entities - ドラフト・バージョン・ライブエントリーのドメインモデル
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional


class SectionType(str, Enum):
    """セクションの種類"""

    SINGLE = "single"
    CHANNEL = "channel"
    STRUCTURE = "structure"


@dataclass(frozen=True)
class Section:
    """エントリーが属するセクション"""

    id: int
    name: str
    type: SectionType

    @property
    def is_single(self) -> bool:
        # シングルは独自のタイトルを持たない
        return self.type == SectionType.SINGLE


@dataclass(frozen=True)
class Snapshot:
    """保存時点のエントリー内容。

    ``fields`` はフィールドID → 値のマッピングで、値が存在したフィールドのみを含む。
    """

    type_id: Optional[int] = None
    author_id: Optional[int] = None
    title: Optional[str] = None
    slug: Optional[str] = None
    post_date: Optional[datetime] = None
    expiry_date: Optional[datetime] = None
    enabled: bool = True
    fields: Dict[int, Any] = field(default_factory=dict)


@dataclass
class EntryRevision:
    """ドラフトとバージョンに共通する属性"""

    entry_id: int
    section_id: int
    locale: str
    creator_id: Optional[int] = None
    type_id: Optional[int] = None
    author_id: Optional[int] = None
    title: Optional[str] = None
    slug: Optional[str] = None
    post_date: Optional[datetime] = None
    expiry_date: Optional[datetime] = None
    enabled: bool = True
    # フィールドハンドル → 値（編集画面から送信された内容）
    field_values: Dict[str, Any] = field(default_factory=dict)
    revision_notes: Optional[str] = None
    date_created: Optional[datetime] = None
    errors: Dict[str, List[str]] = field(default_factory=dict)

    def submitted_field_values(self) -> Mapping[str, Any]:
        return self.field_values

    def add_error(self, attribute: str, message: str) -> None:
        self.errors.setdefault(attribute, []).append(message)

    def has_errors(self) -> bool:
        return bool(self.errors)

    def apply_snapshot(self, snapshot: Snapshot, field_values: Mapping[str, Any]) -> None:
        """スナップショットの内容を自身に反映する"""

        self.type_id = snapshot.type_id
        self.author_id = snapshot.author_id
        self.title = snapshot.title
        self.slug = snapshot.slug
        self.post_date = snapshot.post_date
        self.expiry_date = snapshot.expiry_date
        self.enabled = snapshot.enabled
        self.field_values = dict(field_values)

    def to_live_entry(self) -> "LiveEntry":
        """公開用のライブエントリーを組み立てる"""

        return LiveEntry(
            id=self.entry_id,
            section_id=self.section_id,
            locale=self.locale,
            type_id=self.type_id,
            author_id=self.author_id,
            title=self.title,
            slug=self.slug,
            post_date=self.post_date,
            expiry_date=self.expiry_date,
            enabled=self.enabled,
            field_values=dict(self.field_values),
            revision_notes=self.revision_notes,
        )


@dataclass
class EntryDraft(EntryRevision):
    """名前付きで編集可能なドラフト"""

    draft_id: Optional[int] = None
    name: Optional[str] = None

    @property
    def notes(self) -> Optional[str]:
        return self.revision_notes

    @property
    def is_new(self) -> bool:
        return not self.draft_id


@dataclass
class EntryVersion(EntryRevision):
    """エントリー保存時に自動で作成される不変のバージョン"""

    version_id: Optional[int] = None
    num: int = 0

    @property
    def notes(self) -> Optional[str]:
        return self.revision_notes


@dataclass
class LiveEntry:
    """公開中エントリーと同じ形をしたオブジェクト。エントリーパイプラインに渡される。"""

    id: Optional[int]
    section_id: int
    locale: str
    type_id: Optional[int] = None
    author_id: Optional[int] = None
    title: Optional[str] = None
    slug: Optional[str] = None
    post_date: Optional[datetime] = None
    expiry_date: Optional[datetime] = None
    enabled: bool = True
    field_values: Dict[str, Any] = field(default_factory=dict)
    revision_notes: Optional[str] = None
    errors: Dict[str, List[str]] = field(default_factory=dict)

    def submitted_field_values(self) -> Mapping[str, Any]:
        return self.field_values

    def add_error(self, attribute: str, message: str) -> None:
        self.errors.setdefault(attribute, []).append(message)


__all__ = [
    "EntryDraft",
    "EntryRevision",
    "EntryVersion",
    "LiveEntry",
    "Section",
    "SectionType",
    "Snapshot",
]
