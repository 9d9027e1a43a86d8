"""
Custom exceptions for the catalog search domain.

The matching and scoring functions never raise; these exceptions cover the
surfaces around them (building records, ranking arguments).
"""

from typing import Any, Optional


class CatalogSearchException(Exception):
    """Base exception for all catalog search errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidRecordException(CatalogSearchException):
    """Raised when a catalog record cannot be built from raw data."""

    def __init__(self, field: str, reason: str):
        message = f"Invalid catalog record field '{field}': {reason}"
        super().__init__(message=message, details={"field": field, "reason": reason})


class ValidationException(CatalogSearchException):
    """Raised when input validation fails."""

    def __init__(self, field: str, value: Any, reason: str):
        message = f"Validation failed for {field}: {reason}"
        super().__init__(
            message=message,
            details={"field": field, "value": str(value), "reason": reason},
        )
