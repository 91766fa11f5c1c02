"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class NotFoundError(ApplicationError):
    """Raised when a note cannot be found."""

    def __init__(self, message: str = "Note not found.") -> None:
        super().__init__(message, code="RES_NOT_FOUND")


class ValidationError(ApplicationError):
    """Raised when input is rejected."""

    def __init__(self, message: str = "Validation failed", details: dict[str, Any] | None = None) -> None:
        self.details = details or {}
        super().__init__(message, code="VAL_VALIDATION_ERROR")
