from core.db import db
from flask_migrate import Migrate
from flask_babel import Babel

migrate = Migrate()
babel = Babel()

__all__ = ["db", "migrate", "babel"]
