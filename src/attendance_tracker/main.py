from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS

from .config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import register_error_handlers
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig
from .subjects.controller import register as register_subjects
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(settings_module: Optional[str] = None, *, container: Optional[Container] = None) -> Flask:
    """Build the API application.

    Settings are read once from the module chosen by ``APP_ENV`` (or the one
    given) and passed explicitly into the container. Tests hand in a ready
    container backed by in-memory repositories.
    """
    load_dotenv(override=False)
    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    CORS(app, origins=list(getattr(settings, "CORS_ORIGINS", ["http://localhost:3000"])))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings_module, DBConfig.from_mapping(db_config).describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            db = DBConfig.from_mapping(db_config)
            apply_schema(db)
            logger.info("schema ready (tables=%d)", len(list_tables(db)))

        container = build_container(
            db_config=db_config,
            jwt_secret=getattr(settings, "JWT_SECRET"),
            token_ttl_hours=int(getattr(settings, "JWT_EXPIRES_HOURS", 24)),
        )

    app.extensions["container"] = container

    @app.route("/", endpoint="index")
    def index():
        return "Attendance API is running."

    register_error_handlers(app)
    register_users(app, container)
    register_subjects(app, container)
    register_attendance(app, container)

    return app


if __name__ == "__main__":
    create_app().run()
