import os

from dotenv import load_dotenv

load_dotenv()


class BaseApplicationSettings:
    """Base Flask application configuration populated from the environment."""

    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    db_uri = os.environ.get("DATABASE_URI", "sqlite://")
    SQLALCHEMY_DATABASE_URI = db_uri

    # Internationalisation
    LANGUAGES = [
        segment.strip()
        for segment in os.environ.get("LANGUAGES", "en,ja").split(",")
        if segment.strip()
    ]
    BABEL_DEFAULT_LOCALE = os.environ.get("BABEL_DEFAULT_LOCALE", "en")
    BABEL_DEFAULT_TIMEZONE = os.environ.get("BABEL_DEFAULT_TIMEZONE", "UTC")

    # Entry revisions
    PRIMARY_SITE_LOCALE = os.environ.get("PRIMARY_SITE_LOCALE", BABEL_DEFAULT_LOCALE)
    ENTRY_REVISIONS_HISTORY_LIMIT = int(os.environ.get("ENTRY_REVISIONS_HISTORY_LIMIT", "0") or 0)

    # Database stability
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_recycle": 1800,
        "pool_pre_ping": True,
    }

    if not db_uri.startswith("sqlite"):
        SQLALCHEMY_ENGINE_OPTIONS.update({
            "pool_size": 10,
            "max_overflow": 20,
        })
        if db_uri.startswith("mysql"):
            SQLALCHEMY_ENGINE_OPTIONS["connect_args"] = {"connect_timeout": 10}


class Config(BaseApplicationSettings):
    """Runtime configuration."""


__all__ = ["BaseApplicationSettings", "Config"]
