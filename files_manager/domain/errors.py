"""
Error Handling Module

Defines domain exceptions and error categories for the application.
Domain exceptions are pure and have no external dependencies.
Every error reaching a client is rendered as {"error": <message>}.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCategory(Enum):
    """Error category enumeration for structured error handling."""

    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    CONFLICT = "conflict"
    BAD_REQUEST = "bad_request"
    INTERNAL = "internal"


# HTTP status and default client message per category
ERROR_STATUS: Dict[ErrorCategory, int] = {
    ErrorCategory.UNAUTHORIZED: 401,
    ErrorCategory.NOT_FOUND: 404,
    ErrorCategory.VALIDATION: 400,
    ErrorCategory.CONFLICT: 400,
    ErrorCategory.BAD_REQUEST: 400,
    ErrorCategory.INTERNAL: 500,
}

ERROR_MESSAGES: Dict[ErrorCategory, str] = {
    ErrorCategory.UNAUTHORIZED: "Unauthorized",
    ErrorCategory.NOT_FOUND: "Not found",
    ErrorCategory.VALIDATION: "Invalid request",
    ErrorCategory.CONFLICT: "Already exist",
    ErrorCategory.BAD_REQUEST: "Bad request",
    ErrorCategory.INTERNAL: "Internal Server Error",
}


# ============================================================================
# Domain Exceptions (Pure - No External Dependencies)
# ============================================================================

class DomainError(Exception):
    """
    Base exception for all domain errors.

    Domain exceptions are pure and have no external dependencies.
    They can optionally wrap original errors for context.
    """

    category = ErrorCategory.INTERNAL

    def __init__(self, message: Optional[str] = None, original_error: Exception = None):
        """
        Initialize domain error.

        Args:
            message: Client-facing message, category default if None
            original_error: Optional original exception that caused this error
        """
        self.message = message or ERROR_MESSAGES[self.category]
        super().__init__(self.message)
        self.original_error = original_error

    @property
    def status_code(self) -> int:
        return ERROR_STATUS[self.category]

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class UnauthorizedError(DomainError):
    """
    Raised when a token or credential does not resolve to a live user.

    Carries no detail about which check failed.
    """

    category = ErrorCategory.UNAUTHORIZED


class NotFoundError(DomainError):
    """
    Raised when an entry is absent or the caller has no visibility into it.

    Deliberately used instead of a "forbidden" error so that the existence
    of another user's private entry is never disclosed.
    """

    category = ErrorCategory.NOT_FOUND


class ValidationError(DomainError):
    """Raised when a required field is missing or invalid."""

    category = ErrorCategory.VALIDATION


class ConflictError(DomainError):
    """Raised when a unique value (an email) is already taken."""

    category = ErrorCategory.CONFLICT


class BadRequestError(DomainError):
    """Raised when an operation does not apply to the target entry."""

    category = ErrorCategory.BAD_REQUEST


class StorageError(DomainError):
    """
    Raised when a backing store or the filesystem fails in a way that
    cannot be attributed to caller input.
    """

    category = ErrorCategory.INTERNAL


def create_error_response(
    category: ErrorCategory,
    message: Optional[str] = None,
) -> tuple[Dict[str, Any], int]:
    """
    Create a structured error response for API endpoints.

    Args:
        category: Error category
        message: Client-facing message, category default if None

    Returns:
        Tuple of (error_dict, status_code)
    """
    return {"error": message or ERROR_MESSAGES[category]}, ERROR_STATUS[category]
