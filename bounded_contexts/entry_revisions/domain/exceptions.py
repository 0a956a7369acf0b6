"""エントリーリビジョンで利用する例外定義"""


class EntryRevisionError(Exception):
    """リビジョン機能における基底例外"""


class DraftNotFoundError(EntryRevisionError):
    """ドラフトIDに対応するレコードが存在しない場合の例外"""

    def __init__(self, draft_id: int) -> None:
        super().__init__(f"No draft exists with the ID “{draft_id}”")
        self.draft_id = draft_id


class SnapshotDecodeError(EntryRevisionError):
    """スナップショットデータが壊れている場合の例外"""


class SectionNotFoundError(EntryRevisionError):
    """リビジョンのセクションが存在しない場合の例外"""

    def __init__(self, section_id: int) -> None:
        super().__init__(f"No section exists with the ID “{section_id}”")
        self.section_id = section_id


class RevisionValidationError(EntryRevisionError):
    """リビジョンオブジェクト自体が不正な場合の例外"""
