"""
Application error kinds.
Each error carries an HTTP status hint so a calling layer can translate it
into a user-facing response without inspecting the message.
"""

from http import HTTPStatus
from typing import Any, Dict, List, Optional


class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(
        self,
        message: str,
        status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": {
                "code": self.__class__.__name__,
                "message": self.message,
                "details": self.details,
            }
        }


class RequestValidationException(AppError):
    """Request failed one or more field constraints."""
    def __init__(self, violations: List[Any], message: str = "Request validation failed"):
        self.violations = list(violations)
        super().__init__(
            message,
            HTTPStatus.UNPROCESSABLE_ENTITY,
            {"violations": [{"field": v.field, "message": v.message} for v in self.violations]},
        )


class EntityNotFoundException(AppError):
    """Resource not found error."""
    def __init__(self, message: str = "Entity not found", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, HTTPStatus.NOT_FOUND, details)


class ConstraintViolationException(AppError):
    """Uniqueness or foreign-key constraint rejected by the storage layer."""
    def __init__(self, message: str = "Constraint violation", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, HTTPStatus.CONFLICT, details)


class UnauthorizedException(AppError):
    """Authentication failure error."""
    def __init__(self, message: str = "Unauthorized", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, HTTPStatus.UNAUTHORIZED, details)


class ForbiddenException(AppError):
    """Authorization failure error."""
    def __init__(self, message: str = "Forbidden", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, HTTPStatus.FORBIDDEN, details)
