"""Entry revision インフラストラクチャ層。"""

from .locale import SettingsLocaleProvider
from .repositories import EntryDraftRepository, EntryVersionRepository

__all__ = ["EntryDraftRepository", "EntryVersionRepository", "SettingsLocaleProvider"]
