"""リビジョンのスナップショットをJSONへ変換するコーデック。

スナップショットはフィールドIDをキーにした疎なマッピングとして保存する。
値が存在しない・``None`` のフィールドは保存しないため、後からフィールドが
追加されても古いスナップショットをそのまま読み込める。
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping

from core.time import from_timestamp, to_timestamp

from .entities import Snapshot
from .exceptions import SnapshotDecodeError
from .ports import FieldRegistry, RevisionSource


class SnapshotCodec:
    """リビジョンデータのエンコード・デコードを行う。"""

    def __init__(self, field_registry: FieldRegistry) -> None:
        self.field_registry = field_registry

    def capture(self, source: RevisionSource) -> Snapshot:
        """ソースの固定属性と送信済みフィールド値からスナップショットを作る"""

        content = source.submitted_field_values() or {}
        fields: Dict[int, Any] = {}
        for definition in self.field_registry.all_fields():
            value = content.get(definition.handle)
            if value is not None:
                fields[definition.id] = value

        return Snapshot(
            type_id=source.type_id,
            author_id=source.author_id,
            title=source.title,
            slug=source.slug,
            post_date=source.post_date,
            expiry_date=source.expiry_date,
            enabled=bool(source.enabled),
            fields=fields,
        )

    def encode(self, source: RevisionSource) -> str:
        snapshot = self.capture(source)
        payload = {
            "typeId": snapshot.type_id,
            "authorId": snapshot.author_id,
            "title": snapshot.title,
            "slug": snapshot.slug,
            "postDate": to_timestamp(snapshot.post_date),
            "expiryDate": to_timestamp(snapshot.expiry_date),
            "enabled": snapshot.enabled,
            "fields": {str(field_id): value for field_id, value in snapshot.fields.items()},
        }
        return json.dumps(payload, ensure_ascii=False)

    def decode(self, data: str | bytes, *, include_fields: bool = True) -> Snapshot:
        """JSON文字列をスナップショットへ戻す。

        ``include_fields=False`` の場合、一覧表示用にフィールド値を読み込まない。
        """

        try:
            payload = json.loads(data)
        except (TypeError, ValueError) as exc:
            raise SnapshotDecodeError(f"Malformed revision data: {exc}") from exc

        if not isinstance(payload, dict):
            raise SnapshotDecodeError("Revision data must be a JSON object")

        fields: Dict[int, Any] = {}
        if include_fields:
            raw_fields = payload.get("fields") or {}
            if not isinstance(raw_fields, dict):
                raise SnapshotDecodeError("Revision fields must be a JSON object")
            try:
                fields = {int(field_id): value for field_id, value in raw_fields.items()}
            except ValueError as exc:
                raise SnapshotDecodeError(f"Invalid field identifier: {exc}") from exc

        try:
            post_date = from_timestamp(payload.get("postDate"))
            expiry_date = from_timestamp(payload.get("expiryDate"))
        except (TypeError, ValueError, OverflowError, OSError) as exc:
            raise SnapshotDecodeError(f"Invalid revision date: {exc}") from exc

        return Snapshot(
            type_id=payload.get("typeId"),
            author_id=payload.get("authorId"),
            title=payload.get("title"),
            slug=payload.get("slug"),
            post_date=post_date,
            expiry_date=expiry_date,
            enabled=bool(payload.get("enabled", True)),
            fields=fields,
        )

    def field_values_by_handle(self, snapshot: Snapshot) -> Dict[str, Any]:
        """フィールドIDを現在のハンドルに置き換える。レジストリに無いフィールドは捨てる。"""

        if not snapshot.fields:
            return {}

        handles: Mapping[int, str] = {
            definition.id: definition.handle for definition in self.field_registry.all_fields()
        }
        return {
            handles[field_id]: value
            for field_id, value in snapshot.fields.items()
            if field_id in handles
        }


__all__ = ["SnapshotCodec"]
