"""
Error handling decorators and utilities for API endpoints.

Application exceptions raised by the service layer are translated into
HTTPException responses in one place instead of in every endpoint.
"""

from functools import wraps
from typing import Callable, Dict, List
import inspect
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from constants import HTTPStatus, ValidationMessages
from exceptions import (
    ApplicationError,
    AuthenticationError,
    ConfigurationError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def validation_detail(message: str, errors: Dict[str, List[str]]) -> dict:
    """Body of a 422 response: a summary message plus messages per field."""
    return {"message": message, "errors": errors}


def to_http_exception(operation_name: str, e: ApplicationError) -> HTTPException:
    """
    Map an application exception onto the HTTP error the client should see.

    Args:
        operation_name: Human-readable name of the operation, used in logs
        e: Exception raised by the service layer

    Returns:
        HTTPException ready to raise
    """
    if isinstance(e, ValidationError):
        logger.warning(f"{operation_name} - Validation error: {e.invalid_fields}")
        return HTTPException(
            status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
            detail=validation_detail(e.message, e.invalid_fields)
        )
    if isinstance(e, NotFoundError):
        logger.info(f"{operation_name} - Not found: {e.message}")
        return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=e.message)
    if isinstance(e, AuthenticationError):
        logger.warning(f"{operation_name} - Authentication error: {e.message}")
        return HTTPException(
            status_code=HTTPStatus.UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"}
        )
    if isinstance(e, ConfigurationError):
        logger.error(f"{operation_name} - Configuration error: {e.message}")
        return HTTPException(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail=e.message)
    if isinstance(e, DatabaseError):
        logger.error(f"{operation_name} - Database error: {e.message}", exc_info=True)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail="Database operation failed"
        )
    logger.error(f"{operation_name} - Application error: {e.message}", exc_info=True)
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail=f"{operation_name} failed: {e.message}"
    )


def _unexpected(operation_name: str, e: Exception) -> HTTPException:
    logger.error(f"{operation_name} - Unexpected error: {e}", exc_info=True)
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail=f"{operation_name} failed. Please check server logs or contact support."
    )


def handle_api_errors(operation_name: str):
    """
    Decorator to handle application errors consistently across endpoints.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Create domain")

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.post("/domains", status_code=201)
        @handle_api_errors("Create domain")
        def create_domain(...):
            return service.create_domain(...)
    """
    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except ApplicationError as e:
                raise to_http_exception(operation_name, e)
            except HTTPException:
                # Re-raise HTTPException as-is to preserve status code and detail
                raise
            except Exception as e:
                raise _unexpected(operation_name, e)

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except ApplicationError as e:
                raise to_http_exception(operation_name, e)
            except HTTPException:
                raise
            except Exception as e:
                raise _unexpected(operation_name, e)

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


def _field_name(loc) -> str:
    parts = [str(part) for part in loc if part not in ("body", "query", "path")]
    return ".".join(parts) if parts else "body"


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reshape FastAPI's request validation errors into field-keyed messages."""
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        errors.setdefault(_field_name(error.get("loc", ())), []).append(error.get("msg", "Invalid value"))

    logger.warning(f"{request.method} {request.url.path} - Request validation error: {errors}")
    return JSONResponse(
        status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
        content={"detail": validation_detail(ValidationMessages.GIVEN_DATA_INVALID, errors)}
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
