"""
Error boundary: converts every failure raised while handling a request into
the uniform error envelope.
"""

import logging
from datetime import datetime, UTC

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from sqlalchemy.exc import SQLAlchemyError

from legacore.config import settings
from legacore.core.exceptions import (
    LegacoreException,
    ValidationException,
    DatabaseException,
)

logger = logging.getLogger(__name__)

GENERIC_MESSAGE = "An unexpected error occurred"


def format_error_response(exc: Exception, path: str | None = None) -> dict:
    """
    Build the error envelope for an exception.

    Non-operational errors never expose their message; details are only
    included in development.
    """
    if isinstance(exc, LegacoreException):
        status_code = exc.status_code
        code = exc.code
        message = exc.message if exc.is_operational else exc.default_message
        timestamp = exc.timestamp
        details = exc.details
    else:
        status_code = 500
        code = "InternalServerError"
        message = GENERIC_MESSAGE
        timestamp = datetime.now(UTC)
        details = None

    error = {
        "message": message,
        "code": code,
        "status_code": status_code,
        "timestamp": timestamp.isoformat(),
        "path": path,
    }
    if settings.is_development:
        error["details"] = details if details is not None else repr(exc)
    return {"error": jsonable_encoder(error)}


def _respond(exc: Exception, request: Request) -> JSONResponse:
    body = format_error_response(exc, request.url.path)
    return JSONResponse(status_code=body["error"]["status_code"], content=body)


def _validation_message(errors: list[dict]) -> str:
    missing = [
        str(err["loc"][-1]) for err in errors if err.get("type") == "missing" and err.get("loc")
    ]
    if missing:
        return f"Missing required fields: {', '.join(missing)}"
    parts = []
    for err in errors:
        loc = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return f"Invalid request: {'; '.join(parts)}"


async def legacore_exception_handler(request: Request, exc: LegacoreException):
    if exc.is_operational:
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.code, exc.message)
    else:
        logger.error(
            "%s %s -> %s: %s", request.method, request.url.path, exc.code, exc.message,
            exc_info=exc,
        )
    return _respond(exc, request)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = list(exc.errors())
    details = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in errors
    ]
    wrapped = ValidationException(_validation_message(errors), details=details)
    logger.warning("%s %s -> %s", request.method, request.url.path, wrapped.message)
    return _respond(wrapped, request)


async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database failure on %s %s", request.method, request.url.path, exc_info=exc)
    return _respond(DatabaseException(details=str(exc)), request)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return _respond(exc, request)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LegacoreException, legacore_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
