"""Centralised application settings abstraction.

This module exposes :class:`ApplicationSettings` which consolidates the
configuration lookups used by the entry revision subsystem.  The class treats
the active Flask application config as the primary source and the process
environment (or any mapping provided) as the fallback backing store, returning
sensible defaults where a key is missing.

The global :data:`settings` instance should be used for production code, while
tests can instantiate their own :class:`ApplicationSettings` with a dedicated
mapping to validate behaviour in isolation.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import (
    Any,
    Mapping,
    Optional,
    TYPE_CHECKING,
    cast,
)

from flask import current_app, has_app_context

if TYPE_CHECKING:  # pragma: no cover - typing only
    from flask import Flask


_DEFAULT_LOCALE = "en"


@dataclass(frozen=True)
class _EnvironmentFacade:
    """Thin wrapper that provides ``Mapping`` compatible access to env vars."""

    source: Mapping[str, str]

    @classmethod
    def from_environ(cls, env: Optional[Mapping[str, str]] = None) -> "_EnvironmentFacade":
        return cls(source=os.environ if env is None else env)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.source.get(key, default)


class ApplicationSettings:
    """Domain level representation of configuration values.

    The class favours explicit properties instead of generic ``get`` access so
    that the rest of the application operates on intent-revealing names.
    """

    def __init__(self, env: Optional[Mapping[str, str]] = None) -> None:
        self._env = _EnvironmentFacade.from_environ(env)

    # ------------------------------------------------------------------
    # Generic helpers
    # ------------------------------------------------------------------
    def _get(self, key: str, default: Optional[str] = None):
        if has_app_context():
            app = cast("Flask", current_app)
            app_config = app.config
            if key in app_config:
                return app_config.get(key)

        value = self._env.get(key)
        if value is not None:
            return value

        return default

    def get(self, key: str, default: Any = None) -> Any:
        """Return the configured value for *key* or *default* if missing."""

        value = self._get(key)
        return default if value is None else value

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Return a boolean configuration value."""

        value = self._get(key)
        if value is None:
            return default
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            normalised = value.strip().lower()
            if normalised in {"1", "true", "yes", "on"}:
                return True
            if normalised in {"0", "false", "no", "off"}:
                return False
        return default

    def get_int(self, key: str, default: int = 0) -> int:
        """Return an integer configuration value."""

        value = self._get(key)
        if value is None:
            return default
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    # ------------------------------------------------------------------
    # General
    # ------------------------------------------------------------------
    @property
    def testing(self) -> bool:
        return self.get_bool("TESTING", False)

    @property
    def sqlalchemy_database_uri(self) -> Optional[str]:
        value = self._get("SQLALCHEMY_DATABASE_URI")
        if value is None:
            value = self._get("DATABASE_URI")
        return str(value) if value is not None else None

    # ------------------------------------------------------------------
    # Internationalisation
    # ------------------------------------------------------------------
    @property
    def babel_default_locale(self) -> str:
        value = self._get("BABEL_DEFAULT_LOCALE")
        if not value:
            return _DEFAULT_LOCALE
        return str(value)

    @property
    def primary_site_locale(self) -> str:
        """Locale used when a revision lookup does not name one."""

        value = self._get("PRIMARY_SITE_LOCALE")
        if not value or not str(value).strip():
            return self.babel_default_locale
        return str(value).strip()

    # ------------------------------------------------------------------
    # Entry revisions
    # ------------------------------------------------------------------
    @property
    def entry_revisions_history_limit(self) -> Optional[int]:
        """Default page size for version history, ``None`` when unbounded."""

        limit = self.get_int("ENTRY_REVISIONS_HISTORY_LIMIT", 0)
        return limit if limit > 0 else None


settings = ApplicationSettings()

__all__ = ["ApplicationSettings", "settings"]
