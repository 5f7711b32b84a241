from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS

from .common.errors import register_error_handlers
from .config import get_settings_module
from .container import Container, build_container
from .core.constants import DEFAULT_TOKEN_TTL_HOURS
from .database.bootstrap import apply_schema, list_tables
from .users.controller import register as register_users
from .workweeks.controller import register as register_work_weeks

logger = logging.getLogger(__name__)

CORS_MAX_AGE = int(timedelta(hours=12).total_seconds())


def _install_cors(app: Flask, origins: list[str]) -> None:
    CORS(
        app,
        origins=origins,
        supports_credentials=True,
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Authorization"],
        expose_headers=["Content-Length"],
        max_age=CORS_MAX_AGE,
    )


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    """Build the Flask app.

    When no container is passed, one is wired from the settings module: the
    database is probed until it answers and the schema is applied if
    AUTO_INIT_DB is set.
    """
    load_dotenv(override=False)
    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    debug = bool(getattr(settings, "DEBUG", False))

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = Flask(__name__)
    app.config["DEBUG"] = debug
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.sort_keys = False

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        container = build_container(
            db_config=db_config,
            secret_key=getattr(settings, "SECRET_KEY"),
            token_ttl_hours=int(getattr(settings, "TOKEN_TTL_HOURS", DEFAULT_TOKEN_TTL_HOURS)),
        )
        logger.info("settings=%s db=%s", settings_module, container.conn.config.describe())

        container.conn.wait_until_ready(
            attempts=int(getattr(settings, "DB_CONNECT_ATTEMPTS", 30)),
            delay=float(getattr(settings, "DB_CONNECT_DELAY", 2)),
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(container.conn)
            logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))

    app.extensions["timerwork"] = container

    _install_cors(app, list(getattr(settings, "CORS_ORIGINS", [])))
    register_error_handlers(app)

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    register_users(app, container)
    register_work_weeks(app, container)

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=8080)
