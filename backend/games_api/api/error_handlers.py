"""Global error handlers.

400 and 500 answers carry `{"error": {"code", "message"}}`; other HTTP
errors keep Werkzeug's defaults. The catch-all never leaks internals.
"""

import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import BadRequest, HTTPException

from ..domain.store import StoreUnavailableError

logger = logging.getLogger(__name__)


def _error(code: str, message: str, status: int):
    return jsonify({"error": {"code": code, "message": message}}), status


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(BadRequest)
    def bad_request(exc: BadRequest):
        logger.warning("bad request on %s: %s", request.path, exc.description)
        return _error("BAD_REQUEST", exc.description, 400)

    @app.errorhandler(StoreUnavailableError)
    def store_unavailable(exc: StoreUnavailableError):
        logger.error("store unavailable on %s: %s", request.path, exc)
        return _error("STORE_UNAVAILABLE", "game store is unavailable", 500)

    @app.errorhandler(Exception)
    def unhandled(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        logger.error("unhandled exception on %s", request.path, exc_info=exc)
        return _error("INTERNAL_ERROR", "an unexpected error occurred", 500)
