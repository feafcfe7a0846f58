"""
Error taxonomy and the Flask handlers that render it.

Every error leaves the API as ``{"error": "<message>"}`` with the status
carried by the exception class. Storage and filesystem failures are logged
and reported as a generic 500.
"""

import logging

from flask import Flask
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from diet_tracker.extensions import db
from diet_tracker.utils.http import error

logger = logging.getLogger(__name__)


class AppError(Exception):
    status = 500
    message = "Internal server error"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class ValidationError(AppError):
    status = 400
    message = "Invalid request"


class InvalidType(ValidationError):
    message = "Only image files are allowed"


class TooLarge(ValidationError):
    message = "File too large"


class Unauthenticated(AppError):
    status = 401
    message = "Access token required"


class Forbidden(AppError):
    status = 403
    message = "Invalid token"


class TokenInvalid(Forbidden):
    message = "Invalid token"


class TokenExpired(Forbidden):
    message = "Token expired"


class Conflict(AppError):
    status = 400
    message = "User already exists"


class NotFound(AppError):
    status = 404
    message = "Not found"


class InternalError(AppError):
    status = 500


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(AppError)
    def handle_app_error(exc: AppError):
        if exc.status >= 500:
            logger.error("Request failed: %s", exc.message)
        return error(exc.message, exc.status)

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(exc: RequestEntityTooLarge):
        return error(TooLarge.message, TooLarge.status)

    @app.errorhandler(HTTPException)
    def handle_http_exception(exc: HTTPException):
        return error(exc.description or exc.name, exc.code or 500)

    @app.errorhandler(SQLAlchemyError)
    def handle_storage_error(exc: SQLAlchemyError):
        db.session.rollback()
        logger.exception("Database error")
        return error(InternalError.message, 500)

    @app.errorhandler(OSError)
    def handle_filesystem_error(exc: OSError):
        logger.exception("Filesystem error")
        return error(InternalError.message, 500)
