# webapp/__init__.py
import logging

from flask import Flask, request

from .extensions import db, migrate, babel
from core.logging_config import REVISION_LOGGER_NAME


def _select_locale():
    from flask import current_app, has_request_context

    supported = current_app.config.get("LANGUAGES") or ["en"]
    if has_request_context():
        match = request.accept_languages.best_match(supported)
        if match:
            return match
    return current_app.config.get("BABEL_DEFAULT_LOCALE", "en")


def create_app(config_object=None):
    """アプリケーションファクトリ"""
    from .config import Config

    app = Flask(__name__)
    app.config.from_object(config_object or Config)

    # 拡張初期化
    db.init_app(app)
    migrate.init_app(app, db)
    babel.init_app(app, locale_selector=_select_locale)

    # リビジョン関連のログをアプリケーションロガーと同じハンドラへ流す
    revision_logger = logging.getLogger(REVISION_LOGGER_NAME)
    for handler in app.logger.handlers:
        if handler not in revision_logger.handlers:
            revision_logger.addHandler(handler)

    # モデルをメタデータへ登録
    from core.models import entry_revisions  # noqa: F401

    return app


__all__ = ["create_app"]
