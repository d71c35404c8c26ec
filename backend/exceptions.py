"""
Custom exception classes for the application.

This module defines domain-specific exceptions that provide better error handling
and clearer error messages throughout the application.
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when there's a configuration issue"""

    def __init__(self, message: str, missing_keys: list[str] | None = None):
        details = {"missing_keys": missing_keys} if missing_keys else {}
        super().__init__(message, details)


class ValidationError(ApplicationError):
    """
    Raised when validation fails.

    invalid_fields maps a field name to the list of messages for that field.
    """

    def __init__(self, message: str, invalid_fields: dict[str, list[str]] | None = None):
        self.invalid_fields = invalid_fields or {}
        details = {"invalid_fields": self.invalid_fields} if self.invalid_fields else {}
        super().__init__(message, details)


class NotFoundError(ApplicationError):
    """Raised when a resource does not exist or is not visible to the caller"""

    def __init__(self, resource: str, resource_id: str | None = None, message: str | None = None):
        details = {"resource": resource, "resource_id": resource_id}
        msg = message or f"{resource} not found"
        super().__init__(msg, details)


class AuthenticationError(ApplicationError):
    """Raised when the caller cannot be authenticated"""

    def __init__(self, message: str = "Unauthenticated."):
        super().__init__(message)


class DatabaseError(ApplicationError):
    """Raised when database operations fail"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)
