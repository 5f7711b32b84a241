from __future__ import annotations

import logging

import mysql.connector
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from ..core.exceptions import DomainError, InternalError

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    """Translate exceptions raised by views into JSON error bodies."""

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return jsonify({"error": str(e)}), e.status_code

    @app.errorhandler(mysql.connector.Error)
    @app.errorhandler(InternalError)
    def handle_internal_error(e: Exception):
        logger.exception("Database error")
        return jsonify({"error": "Database error"}), 500

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"error": e.description}), e.code
