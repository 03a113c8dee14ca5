"""Custom exceptions for source mode rendering."""

from typing import Any


class SourceModeError(Exception):
    """Base exception for source mode rendering."""

    def __init__(self, message: str, error_details: dict[str, Any] | None = None):
        """
        Initialize the exception.

        Args:
            message: Error message
            error_details: Optional dictionary with detailed error information
        """
        super().__init__(message)
        self.error_details = error_details


class SourceModeSettingsError(SourceModeError):
    """Raised when source mode settings contain invalid values."""
