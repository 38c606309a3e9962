"""
Error Handling Module

Defines the error categories and exceptions raised by the files manager.
Every failure path of a service operation ends in exactly one of these
exceptions; the API layer maps them to HTTP responses via to_dict().
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCategory(Enum):
    """Error category enumeration for structured error handling."""

    UNAUTHORIZED = "unauthorized"
    MISSING_FIELD = "missing_field"
    PARENT_NOT_FOUND = "parent_not_found"
    PARENT_NOT_A_FOLDER = "parent_not_a_folder"
    NOT_FOUND = "not_found"
    NO_CONTENT_FOR_FOLDER = "no_content_for_folder"
    ALREADY_EXISTS = "already_exists"
    STORE_UNAVAILABLE = "store_unavailable"


# Client-facing messages and HTTP status per category
ERROR_MESSAGES: Dict[ErrorCategory, Dict[str, Any]] = {
    ErrorCategory.UNAUTHORIZED: {"message": "Unauthorized", "status": 401},
    ErrorCategory.MISSING_FIELD: {"message": "Missing {field}", "status": 400},
    ErrorCategory.PARENT_NOT_FOUND: {"message": "Parent not found", "status": 400},
    ErrorCategory.PARENT_NOT_A_FOLDER: {
        "message": "Parent is not a folder",
        "status": 400,
    },
    ErrorCategory.NOT_FOUND: {"message": "Not found", "status": 404},
    ErrorCategory.NO_CONTENT_FOR_FOLDER: {
        "message": "A folder doesn't have content",
        "status": 400,
    },
    ErrorCategory.ALREADY_EXISTS: {"message": "Already exist", "status": 400},
    ErrorCategory.STORE_UNAVAILABLE: {
        "message": "Internal Server Error",
        "status": 500,
    },
}


class ApplicationError(Exception):
    """
    Base error with category and client-facing message.

    Subclasses fix the category; the technical message is kept for logs
    and never sent to the client.
    """

    category: ErrorCategory = ErrorCategory.STORE_UNAVAILABLE

    def __init__(
        self,
        technical_message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        """
        Initialize application error.

        Args:
            technical_message: Technical error details for logging
            context: Values interpolated into the client message
            original_error: Optional original exception that caused this error
        """
        self.technical_message = technical_message or ""
        self.context = context or {}
        self.original_error = original_error

        error_info = ERROR_MESSAGES[self.category]
        self.message = error_info["message"].format(**self.context)
        self.http_status = error_info["status"]

        super().__init__(self.technical_message or self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to dictionary for API response.

        Returns:
            Dictionary with error information
        """
        return {"error": self.message, "category": self.category.value}


class UnauthorizedError(ApplicationError):
    """Raised when credentials or the session token are missing or invalid."""

    category = ErrorCategory.UNAUTHORIZED


class MissingFieldError(ApplicationError):
    """Raised when a required request field is absent or invalid."""

    category = ErrorCategory.MISSING_FIELD

    def __init__(self, field: str, technical_message: Optional[str] = None):
        self.field = field
        super().__init__(technical_message, context={"field": field})


class ParentNotFoundError(ApplicationError):
    """Raised when the requested parent id does not reference a file."""

    category = ErrorCategory.PARENT_NOT_FOUND


class ParentNotAFolderError(ApplicationError):
    """Raised when the requested parent exists but is not a folder."""

    category = ErrorCategory.PARENT_NOT_A_FOLDER


class NotFoundError(ApplicationError):
    """
    Raised when a file is absent or the caller may not see it.

    Missing files and files owned by someone else are reported the same
    way so callers cannot probe for other users' files.
    """

    category = ErrorCategory.NOT_FOUND


class NoContentForFolderError(ApplicationError):
    """Raised when content is requested for a folder."""

    category = ErrorCategory.NO_CONTENT_FOR_FOLDER


class UserAlreadyExistsError(ApplicationError):
    """Raised when registering an email that is already taken."""

    category = ErrorCategory.ALREADY_EXISTS


class StoreUnavailableError(ApplicationError):
    """
    Raised when Redis or the content directory cannot be reached.

    Fatal for the current operation and never retried here.
    """

    category = ErrorCategory.STORE_UNAVAILABLE


def create_error_response(error: ApplicationError) -> tuple[Dict[str, Any], int]:
    """
    Create a structured error response for API endpoints.

    Args:
        error: The application error to render

    Returns:
        Tuple of (error_dict, status_code)
    """
    return error.to_dict(), error.http_status
