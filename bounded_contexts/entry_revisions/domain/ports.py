"""リビジョン機能が依存する外部サービスのインターフェース。"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional, Protocol, Sequence, runtime_checkable

from .entities import LiveEntry, Section


@dataclass(frozen=True)
class FieldDefinition:
    """動的フィールドの定義。IDはハンドル変更後も変わらない。"""

    id: int
    handle: str


@runtime_checkable
class RevisionSource(Protocol):
    """スナップショット化できるオブジェクト（ドラフト・バージョン・ライブエントリー）"""

    type_id: Optional[int]
    author_id: Optional[int]
    title: Optional[str]
    slug: Optional[str]
    post_date: Optional[datetime]
    expiry_date: Optional[datetime]
    enabled: bool

    def submitted_field_values(self) -> Mapping[str, Any]:  # pragma: no cover - プロトコル定義
        ...


@runtime_checkable
class Actor(Protocol):
    """操作を行うユーザー"""

    id: int

    def can(self, permission: str) -> bool:  # pragma: no cover - プロトコル定義
        ...


class FieldRegistry(Protocol):
    """システム全体の動的フィールド定義"""

    def all_fields(self) -> Sequence[FieldDefinition]:  # pragma: no cover - プロトコル定義
        ...


class EntryPipeline(Protocol):
    """ライブエントリーの検証と保存を行うパイプライン。

    保存に成功した場合、同じエントリー・ロケールに対して
    バージョンの保存を呼び出すことが期待される。
    """

    def save_entry(self, entry: LiveEntry) -> bool:  # pragma: no cover - プロトコル定義
        ...


class SectionProvider(Protocol):
    def get_section_by_id(self, section_id: int) -> Optional[Section]:  # pragma: no cover - プロトコル定義
        ...


class LocaleProvider(Protocol):
    def primary_locale(self) -> str:  # pragma: no cover - プロトコル定義
        ...


__all__ = [
    "Actor",
    "EntryPipeline",
    "FieldDefinition",
    "FieldRegistry",
    "LocaleProvider",
    "RevisionSource",
    "SectionProvider",
]
