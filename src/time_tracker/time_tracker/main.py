from __future__ import annotations

import atexit
import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS
from pymongo.errors import PyMongoError

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http_errors import register_error_handlers
from .container import Container, build_container
from .database.bootstrap import ACTIVE_ENTRY_INDEX, ensure_indexes, has_active_entry_index
from .reports.controller import register as register_reports
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)


def warn_if_indexes_missing(conn) -> None:
    try:
        ready = has_active_entry_index(conn)
    except PyMongoError as exc:
        logger.warning("Could not check MongoDB indexes: %s", exc)
        return
    if not ready:
        logger.warning(
            "Index %r is missing: duplicate clock-ins are not prevented. Run scripts/init_db.py or set AUTO_INIT_DB=1",
            ACTIVE_ENTRY_INDEX,
        )


def create_app(*, container: Optional[Container] = None, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    CORS(app, origins=getattr(settings, "CORS_ORIGINS", "*"))

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        jwt_secret = getattr(settings, "JWT_SECRET", None)
        if not db_config.get("uri") or not jwt_secret:
            raise RuntimeError("MONGODB_URI and JWT_SECRET must be set")

        container = build_container(
            db_config=db_config,
            jwt_secret=jwt_secret,
            token_ttl_hours=int(getattr(settings, "TOKEN_TTL_HOURS", 24)),
        )
        atexit.register(container.conn.close)
        logger.info("settings=%s database=%s", settings_module, db_config.get("database"))

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            ensure_indexes(container.conn)
        else:
            warn_if_indexes_missing(container.conn)

    app.extensions["time_tracker"] = container
    register_error_handlers(app)

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok", "message": "Server is running"})

    register_users(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
