from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConcurrentClockError,
    ConflictError,
    DomainError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Most specific first.
STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (ConcurrentClockError, 409),
    (ConflictError, 400),
    (ValidationError, 400),
    (InvalidCredentialsError, 400),
    (MissingTokenError, 401),
    (InvalidTokenError, 403),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
)


def status_for(error: DomainError) -> int:
    for error_type, status in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status
    return 400


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(error: DomainError):
        status = status_for(error)
        logger.debug("%s -> %s: %s", type(error).__name__, status, error)
        return jsonify({"error": str(error)}), status

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException):
        if error.code is not None and error.code < 400:
            # routing redirects
            return error
        return jsonify({"error": error.description or error.name}), error.code or 500

    @app.errorhandler(Exception)
    def handle_unexpected(error: Exception):
        logger.exception("Unhandled error")
        return jsonify({"error": "Internal server error"}), 500
