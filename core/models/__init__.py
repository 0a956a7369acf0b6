"""ORM models shared across applications."""

# モデルの循環インポートを避けるため、ここで一括インポート
from .entry_revisions import EntryDraftRecord, EntryVersionRecord

__all__ = [
    'EntryDraftRecord',
    'EntryVersionRecord',
]
