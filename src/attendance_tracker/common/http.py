from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, g, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import DomainError, StorageError
from ..users.tokens import TokenService

logger = logging.getLogger(__name__)


def error_response(message: str, code: str, status: int):
    return jsonify({"error": message, "code": code}), status


def bearer_required(tokens: TokenService):
    """Build a decorator that rejects requests without a valid bearer token.

    The verified user id is stored on ``flask.g.user_id``.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            g.user_id = tokens.verify_header(request.headers.get("Authorization"))
            return view(*args, **kwargs)

        return wrapper

    return decorator


def json_body():
    return request.get_json(silent=True)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(StorageError)
    def handle_storage_error(e: StorageError):
        # Driver details are logged in the repository layer, never returned.
        return error_response("Internal server error.", e.code, e.status_code)

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return error_response(str(e), e.code, e.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return error_response(e.description or e.name, e.name.lower().replace(" ", "_"), e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.path)
        return error_response("Internal server error.", "internal_error", 500)
