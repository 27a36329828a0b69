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


class ResourceNotFoundError(ApplicationError):
    """Raised when a requested entity does not exist"""

    def __init__(self, resource: str, field: str, value):
        details = {"resource": resource, field: value}
        super().__init__(f"{resource} not found with {field}: {value}", details)


class ValidationError(ApplicationError):
    """Raised when validation fails"""

    def __init__(self, message: str, invalid_fields: dict | None = None):
        details = {"invalid_fields": invalid_fields} if invalid_fields else {}
        super().__init__(message, details)


class InvalidOperationError(ApplicationError):
    """Raised when an operation conflicts with the current state of an entity"""


class AuthenticationError(ApplicationError):
    """Raised when credentials or tokens are rejected"""


class AccessDeniedError(ApplicationError):
    """Raised when the caller lacks the role or ownership an operation requires"""


class StorageError(ApplicationError):
    """Raised when the file store cannot write or delete a file"""

    def __init__(self, message: str, filename: str | None = None):
        details = {"filename": filename} if filename else {}
        super().__init__(message, details)


class StorageFileNotFoundError(StorageError):
    """Raised when a stored file cannot be read"""
