from datetime import datetime, UTC
from enum import Enum
from typing import Any


class LegacoreException(Exception):
    """
    Base exception for the platform.

    Every subclass maps 1:1 to an HTTP status. Operational errors are
    client-correctable and their message is safe to return; the others are
    reported to the client with a generic message.
    """

    status_code: int = 500
    is_operational: bool = True
    default_message: str = "An unexpected error occurred"

    def __init__(self, message: str | None = None, details: Any = None):
        self.message = message or self.default_message
        self.details = details
        self.timestamp = datetime.now(UTC)
        super().__init__(self.message)

    @property
    def code(self) -> str:
        """Stable identifier of the error kind"""
        return type(self).__name__


class ValidationException(LegacoreException):
    """Raised for missing or malformed input"""

    status_code = 400
    default_message = "Validation failed"


class UnauthorizedException(LegacoreException):
    """Raised when the caller is not authenticated"""

    status_code = 401
    default_message = "Authentication required"


class ForbiddenException(LegacoreException):
    """Raised when the caller may not access the resource"""

    status_code = 403
    default_message = "Insufficient permissions"


class NotFoundException(LegacoreException):
    """Raised when resource not found"""

    status_code = 404
    default_message = "Resource not found"


class ConflictException(LegacoreException):
    """Raised when a unique key (slug, name, email, ...) is already taken"""

    status_code = 409
    default_message = "Resource already exists"


class RateLimitException(LegacoreException):
    status_code = 429
    default_message = "Too many requests"


class DatabaseException(LegacoreException):
    """Raised when a data-store operation fails"""

    status_code = 500
    is_operational = False
    default_message = "Database operation failed"


class ExternalServiceException(LegacoreException):
    """Raised when an external collaborator (AI backend, ...) fails"""

    status_code = 503
    is_operational = False

    def __init__(self, service: str, message: str | None = None, details: Any = None):
        self.service = service
        super().__init__(message or f"External service {service} failed", details)


def validate_enum(value: Any, enum_cls: type[Enum], field_name: str = "value") -> Enum:
    """
    Coerce value into enum_cls or raise ValidationException.

    Accepts either an enum member or its raw value.
    """
    try:
        return enum_cls(value)
    except ValueError:
        valid = ", ".join(str(member.value) for member in enum_cls)
        raise ValidationException(f"Invalid {field_name}. Must be one of: {valid}")
