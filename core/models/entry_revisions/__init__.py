"""Entry revision ORM models."""

from .models import EntryDraftRecord, EntryVersionRecord

__all__ = ["EntryDraftRecord", "EntryVersionRecord"]
