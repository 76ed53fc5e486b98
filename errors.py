"""
errors.py
---------
Typed failures raised by the data-access and service layers.

Repositories raise StorageError when the database itself fails; an absent
row is reported as None or an empty list. Services turn absent rows and
rejected input into NotFoundError, ConflictError and ValidationError.
"""

from typing import Any, Optional


class LightBnBError(Exception):
    """Base exception for the LightBnB data layer."""

    def __init__(
        self,
        message: str,
        code: str = "LIGHTBNB_ERROR",
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


class StorageError(LightBnBError):
    """The database could not run a statement (connection, constraint, bad value)."""

    def __init__(self, message: str = "Database error", details: Optional[dict[str, Any]] = None):
        super().__init__(message=message, code="STORAGE_ERROR", details=details)


class NotFoundError(LightBnBError):
    """Requested record does not exist."""

    def __init__(self, message: str = "Record not found", details: Optional[dict[str, Any]] = None):
        super().__init__(message=message, code="NOT_FOUND", details=details)


class ConflictError(LightBnBError):
    """Record clashes with an existing one."""

    def __init__(self, message: str = "Record already exists", details: Optional[dict[str, Any]] = None):
        super().__init__(message=message, code="CONFLICT", details=details)


class ValidationError(LightBnBError):
    """Caller supplied unusable input."""

    def __init__(self, message: str = "Validation failed", details: Optional[dict[str, Any]] = None):
        super().__init__(message=message, code="VALIDATION_ERROR", details=details)
