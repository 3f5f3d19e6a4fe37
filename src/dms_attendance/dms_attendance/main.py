from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .core.exceptions import AuthenticationError, AuthorizationError, StorageError, ValidationError
from .database.bootstrap import apply_schema, list_tables
from .logging_config import configure_logging
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    def _error(status: int, code: str, message: str):
        return jsonify({"error": {"code": code, "message": message}}), status

    @app.errorhandler(ValidationError)
    def _validation(exc: ValidationError):
        return _error(400, "VALIDATION_ERROR", str(exc))

    @app.errorhandler(AuthenticationError)
    def _authentication(exc: AuthenticationError):
        return _error(401, "AUTHENTICATION_ERROR", str(exc))

    @app.errorhandler(AuthorizationError)
    def _authorization(exc: AuthorizationError):
        return _error(403, "AUTHORIZATION_ERROR", str(exc))

    @app.errorhandler(StorageError)
    def _storage(exc: StorageError):
        logger.error("Storage failure: %s", exc)
        return _error(503, "STORAGE_ERROR", "Storage temporarily unavailable")


def create_app(container=None) -> Flask:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(
        getattr(settings, "LOG_LEVEL", "INFO"),
        json_logs=bool(getattr(settings, "LOG_JSON", False)),
    )

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(db_config=db_config)

    register_error_handlers(app)
    register_users(app, container)
    register_attendance(app, container)

    return app
