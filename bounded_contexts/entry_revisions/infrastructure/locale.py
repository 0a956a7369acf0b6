"""設定値からプライマリロケールを解決するアダプター。"""

from __future__ import annotations

from typing import Optional

from core.settings import ApplicationSettings, settings as default_settings


class SettingsLocaleProvider:
    """``PRIMARY_SITE_LOCALE`` (未設定時は ``BABEL_DEFAULT_LOCALE``) を返す"""

    def __init__(self, app_settings: Optional[ApplicationSettings] = None) -> None:
        self._settings = app_settings or default_settings

    def primary_locale(self) -> str:
        return self._settings.primary_site_locale


__all__ = ["SettingsLocaleProvider"]
