"""
Exception handlers for the application.

Every failure leaves the API as ``{"error": "<message>"}``.
"""
# Standard library imports
import logging

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# Local application imports
from ..domain.exceptions import TodoApiError

logger = logging.getLogger(__name__)


async def todo_api_exception_handler(request: Request, exc: TodoApiError) -> JSONResponse:
    """
    Handler for domain errors raised by use cases and repositories.
    Store errors keep the driver's message.
    """
    if exc.status_code >= 500:
        logger.error(
            f"{type(exc).__name__} in {request.method} {request.url.path}: {exc.message}",
            exc_info=exc,
        )
    else:
        logger.warning(
            f"{type(exc).__name__} in {request.method} {request.url.path}: {exc.message}"
        )

    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """
    Handler for bodies FastAPI cannot parse (malformed JSON, non-object body).
    """
    errors = exc.errors()
    detail = errors[0].get("msg", "Invalid request body") if errors else "Invalid request body"
    logger.warning(f"Rejected request body in {request.method} {request.url.path}: {detail}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": detail},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handler for anything the use cases did not classify.
    Reported as a 500 with the exception message passed through.
    """
    logger.error(
        f"Unhandled exception in {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": str(exc)},
    )


def register_exception_handlers(application: FastAPI) -> None:
    """Attach all JSON error handlers to the application"""
    application.add_exception_handler(TodoApiError, todo_api_exception_handler)
    application.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)
