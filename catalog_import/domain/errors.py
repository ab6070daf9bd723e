"""
Error Handling Module

Defines domain exceptions and error categories for the import pipeline.
Domain exceptions are pure and have no external dependencies.
Application exceptions carry user-facing messages for the REST layer.
"""

from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCategory(Enum):
    """Error category enumeration for structured error handling."""

    INVALID_URL = "invalid_url"
    INVALID_REQUEST = "invalid_request"
    UNSUPPORTED_SOURCE = "unsupported_source"
    CONTENT_NOT_FOUND = "content_not_found"
    PLATFORM_UNAVAILABLE = "platform_unavailable"
    DUPLICATE_CONTENT = "duplicate_content"
    STORE_UNAVAILABLE = "store_unavailable"
    SYSTEM_ERROR = "system_error"


# User-friendly error messages with actionable guidance
ERROR_MESSAGES: Dict[ErrorCategory, Dict[str, str]] = {
    ErrorCategory.INVALID_URL: {
        "title": "Invalid URL",
        "message": "The URL does not point to a single item on a supported platform.",
        "action": "Copy the item URL directly from the platform and try again.",
    },
    ErrorCategory.INVALID_REQUEST: {
        "title": "Invalid Request",
        "message": "The request is missing required information or contains invalid data.",
        "action": "Please check your input and try again.",
    },
    ErrorCategory.UNSUPPORTED_SOURCE: {
        "title": "Unsupported Source",
        "message": "No importer is registered for the requested source.",
        "action": "Use one of the sources listed by the /import/sources endpoint.",
    },
    ErrorCategory.CONTENT_NOT_FOUND: {
        "title": "Content Not Found",
        "message": "The requested content could not be found on the source platform.",
        "action": "Check that the content is public and still available.",
    },
    ErrorCategory.PLATFORM_UNAVAILABLE: {
        "title": "Platform Unavailable",
        "message": "The source platform could not be reached.",
        "action": "Please try again later.",
    },
    ErrorCategory.DUPLICATE_CONTENT: {
        "title": "Content Already Exists",
        "message": "This content has already been imported into the catalog.",
        "action": "No action needed.",
    },
    ErrorCategory.STORE_UNAVAILABLE: {
        "title": "Catalog Unavailable",
        "message": "The catalog store could not be reached.",
        "action": "Please try again later. If the problem persists, contact support.",
    },
    ErrorCategory.SYSTEM_ERROR: {
        "title": "System Error",
        "message": "An unexpected error occurred while processing your request.",
        "action": "Please try again later. If the problem persists, contact support.",
    },
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

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        """
        Initialize domain error.

        Args:
            message: Error message
            original_error: Optional original exception that caused this error
        """
        super().__init__(message)
        self.original_error = original_error


class InvalidUrlError(DomainError):
    """Raised when a URL cannot be mapped to a single platform item."""

    pass


class InvalidRequestError(DomainError):
    """Raised when an import request fails validation."""

    pass


class AdapterNotFoundError(DomainError):
    """Raised when no adapter is registered for a source type."""

    pass


class UnsupportedUrlError(DomainError):
    """Raised when no registered adapter recognizes a URL."""

    pass


class ChannelImportNotSupportedError(DomainError):
    """
    Raised when a collection URL reaches a single-item entry point.

    Channel imports must go through the explicit channel operation.
    """

    pass


class ContentFetchError(DomainError):
    """
    Raised when the external platform cannot deliver content.

    This is a generic domain exception that doesn't depend on
    any specific transport library (e.g., httpx, yt-dlp).
    """

    pass


class ContentNotFoundError(ContentFetchError):
    """Raised when the platform reports that the item does not exist."""

    pass


class ChannelFetchError(ContentFetchError):
    """
    Raised when a channel page fetch fails part-way through.

    Carries the items normalized before the failing page so that the
    caller can still process them.
    """

    def __init__(
        self,
        message: str,
        partial_items: Optional[List[Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message, original_error=original_error)
        self.partial_items = list(partial_items or [])


class CatalogStoreError(DomainError):
    """Raised when the catalog store fails to read or write."""

    pass


class DuplicateContentError(CatalogStoreError):
    """
    Raised by the catalog store when the natural key is already taken.

    The natural key is the (external_id, source_type) pair.
    """

    pass


# ============================================================================
# Application Layer Exceptions
# ============================================================================


class ApplicationError(Exception):
    """
    Base application error with category and user-friendly messaging.

    Bridges domain errors with user-facing error messages and HTTP responses.
    """

    def __init__(
        self,
        category: ErrorCategory,
        technical_message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize application error.

        Args:
            category: Error category
            technical_message: Technical error details for logging
            context: Additional context information
        """
        self.category = category
        self.technical_message = technical_message or ""
        self.context = context or {}

        error_info = ERROR_MESSAGES.get(
            category, ERROR_MESSAGES[ErrorCategory.SYSTEM_ERROR]
        )
        self.title = error_info["title"]
        self.message = error_info["message"]
        self.action = error_info["action"]

        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to dictionary for API response.

        Returns:
            Dictionary with error information
        """
        data = {
            "error": self.category.value,
            "title": self.title,
            "message": self.message,
            "action": self.action,
        }
        if self.technical_message:
            data["detail"] = self.technical_message
        return data


def categorize_domain_error(error: Exception) -> ErrorCategory:
    """
    Map a domain exception to the error category shown to API clients.

    Args:
        error: Exception raised by the domain or infrastructure layer

    Returns:
        ErrorCategory for the exception
    """
    if isinstance(error, InvalidUrlError):
        return ErrorCategory.INVALID_URL
    if isinstance(error, (InvalidRequestError, ChannelImportNotSupportedError)):
        return ErrorCategory.INVALID_REQUEST
    if isinstance(error, (AdapterNotFoundError, UnsupportedUrlError)):
        return ErrorCategory.UNSUPPORTED_SOURCE
    if isinstance(error, ContentNotFoundError):
        return ErrorCategory.CONTENT_NOT_FOUND
    if isinstance(error, ContentFetchError):
        return ErrorCategory.PLATFORM_UNAVAILABLE
    if isinstance(error, DuplicateContentError):
        return ErrorCategory.DUPLICATE_CONTENT
    if isinstance(error, CatalogStoreError):
        return ErrorCategory.STORE_UNAVAILABLE
    return ErrorCategory.SYSTEM_ERROR


def create_error_response(
    category: ErrorCategory,
    technical_message: Optional[str] = None,
    context: Optional[Dict[str, Any]] = None,
    status_code: int = 400,
) -> tuple[Dict[str, Any], int]:
    """
    Create a structured error response for API endpoints.

    Args:
        category: Error category
        technical_message: Technical error details
        context: Additional context information
        status_code: HTTP status code

    Returns:
        Tuple of (error_dict, status_code)
    """
    error = ApplicationError(category, technical_message, context)
    return error.to_dict(), status_code
