"""Custom exceptions for rich document operations."""

from typing import Any


class RichDocError(Exception):
    """Base exception for rich document operations."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class RichDocPositionError(RichDocError):
    """Raised when a position falls outside the bounds of a document."""


class RichDocChangeError(RichDocError):
    """Raised when a change cannot be applied to a document."""


class RichDocJSONError(RichDocError):
    """Raised when a JSON node tree is malformed."""
