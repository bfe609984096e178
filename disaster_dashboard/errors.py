"""Centralised error handling and custom exceptions.

This module defines custom exception classes and provides Flask error
handlers that serialise them into JSON responses. Route handlers and
the query helpers raise these exceptions instead of building error
responses by hand, so every endpoint reports failures with the same
``{"error": ..., "code": ...}`` body.

Unexpected exceptions are logged with their traceback and answered
with an opaque 500 message; internal details never reach the client.
"""
from __future__ import annotations

import logging

from flask import jsonify
from werkzeug.exceptions import HTTPException

from .db import db

logger = logging.getLogger(__name__)


class ValidationError(Exception):
    """Raised when input validation fails.

    ``code`` is a stable machine-readable identifier such as
    ``INVALID_SEVERITY``; ``fields`` optionally maps field names to the
    individual messages collected while validating.
    """

    def __init__(self, message: str, code: str = "VALIDATION_ERROR", fields: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.fields = fields or {}

    def to_response(self, status_code: int = 400):
        response = {"error": self.message, "code": self.code}
        if self.fields:
            response["fields"] = self.fields
        return jsonify(response), status_code


class NotFoundError(Exception):
    """Raised when a requested row cannot be found."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self, status_code: int = 404):
        return jsonify({"error": self.message}), status_code


def register_error_handlers(app) -> None:
    """Register custom error handlers on the given Flask app."""
    @app.errorhandler(ValidationError)
    def handle_validation_error(err: ValidationError):
        return err.to_response(400)

    @app.errorhandler(NotFoundError)
    def handle_not_found_error(err: NotFoundError):
        return err.to_response(404)

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        return jsonify({"error": err.description}), err.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        db.session.rollback()
        logger.exception("Unhandled error while serving request")
        return jsonify({"error": "Internal server error"}), 500
