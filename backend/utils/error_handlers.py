"""
Error handling decorators and utilities for API endpoints.

Domain exceptions raised by the services are translated to HTTPException
here so every router reports failures with the same status codes. The
response body itself is rendered by the exception handlers in main.py.
"""

from functools import wraps
from typing import Callable
import inspect
import logging

from fastapi import HTTPException
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import IntegrityError

from constants import HTTPStatus, ErrorMessages
from exceptions import (
    ResourceNotFoundError,
    ValidationError,
    InvalidOperationError,
    AuthenticationError,
    AccessDeniedError,
    StorageError,
    StorageFileNotFoundError,
    ApplicationError
)

logger = logging.getLogger(__name__)


def _validation_detail(error: ValidationError):
    invalid_fields = error.details.get("invalid_fields")
    if not invalid_fields:
        return error.message
    return {
        "message": error.message,
        "errors": [{"field": field, "message": message} for field, message in invalid_fields.items()]
    }


def to_http_exception(operation_name: str, error: Exception) -> HTTPException:
    """
    Map an exception raised inside an endpoint to an HTTPException.

    Args:
        operation_name: Human-readable name of the operation (for logging)
        error: Exception raised by the endpoint

    Returns:
        HTTPException carrying the status code and message for the client
    """
    if isinstance(error, HTTPException):
        return error

    if isinstance(error, (ResourceNotFoundError, StorageFileNotFoundError)):
        logger.warning(f"{operation_name} - Not found: {error.message}")
        return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=error.message)

    if isinstance(error, ValidationError):
        logger.warning(f"{operation_name} - Validation error: {error.message}")
        return HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=_validation_detail(error))

    if isinstance(error, InvalidOperationError):
        logger.warning(f"{operation_name} - Invalid operation: {error.message}")
        return HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=error.message)

    if isinstance(error, AuthenticationError):
        logger.warning(f"{operation_name} - Authentication failed: {error.message}")
        return HTTPException(
            status_code=HTTPStatus.UNAUTHORIZED,
            detail=error.message,
            headers={"WWW-Authenticate": "Bearer"}
        )

    if isinstance(error, AccessDeniedError):
        logger.warning(f"{operation_name} - Access denied: {error.message}")
        return HTTPException(status_code=HTTPStatus.FORBIDDEN, detail=error.message)

    if isinstance(error, StorageError):
        logger.error(f"{operation_name} - Storage error: {error.message}", exc_info=True)
        return HTTPException(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail=error.message)

    if isinstance(error, IntegrityError):
        logger.warning(f"{operation_name} - Integrity error: {error.orig}")
        return HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=ErrorMessages.DUPLICATE_RECORD)

    if isinstance(error, ApplicationError):
        logger.error(f"{operation_name} - Application error: {error.message}", exc_info=True)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed: {error.message}"
        )

    logger.error(f"{operation_name} - Unexpected error: {error}", exc_info=True)
    return HTTPException(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail=ErrorMessages.UNEXPECTED)


def handle_api_errors(operation_name: str):
    """
    Decorator to handle common API errors consistently across endpoints.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Create song")

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.delete("/{id}", status_code=204)
        @handle_api_errors("Delete song")
        def delete_song(id: int, service: SongService = Depends(get_song_service)):
            service.delete_song(song_id=id)
    """
    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except (HTTPException, RequestValidationError):
                # Re-raise as-is so the app-wide handlers render them
                raise
            except Exception as e:
                raise to_http_exception(operation_name, e) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except (HTTPException, RequestValidationError):
                raise
            except Exception as e:
                raise to_http_exception(operation_name, e) from e

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        else:
            return sync_wrapper

    return decorator
