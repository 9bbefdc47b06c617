"""Maps exceptions onto the JSON error envelope.

Domain failures carry their own message. Anything unexpected is logged
with its traceback and answered with a generic 500 that leaks nothing.
"""

from __future__ import annotations

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from storefront.domain.exceptions import (
    AuthenticationError,
    DomainException,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def status_for(exc: DomainException) -> int:
    if isinstance(exc, ValidationError):
        return 400
    if isinstance(exc, AuthenticationError):
        return 401
    if isinstance(exc, NotAuthorizedError):
        return 403
    if isinstance(exc, NotFoundError):
        return 404
    return 400


def _failure(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def register_error_handlers(app: Flask) -> None:

    @app.errorhandler(DomainException)
    def handle_domain_error(exc: DomainException):
        status = status_for(exc)
        logger.info("%s %s -> %d: %s", request.method, request.path, status, exc)
        return _failure(str(exc), status)

    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException):
        return _failure(exc.description or exc.name, exc.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        logger.exception("%s %s failed", request.method, request.path)
        return _failure("Server error", 500)
