"""Centralized exception handlers for the FastAPI application.

Maps pagination exceptions to HTTP responses. Routers let these
exceptions propagate and rely on the handlers for status codes.

Usage in main.py:
    from src.paging.api.exception_handlers import register_exception_handlers
    register_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.paging.errors import (
    PaginationRequestError,
    SchemaConflictError,
    SchemaNotRegisteredError,
    SchemaRegistrationError,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Mapping: exception class -> HTTP status code
#
# "Bad query parameters" -> 422 (field -> messages body)
# "Unknown entity"       -> 404
# "Broken schema"        -> 500 (configuration error, details logged only)
# ---------------------------------------------------------------------------

_SCHEMA_EXCEPTIONS: list[type[Exception]] = [
    SchemaConflictError,
    SchemaRegistrationError,
]


async def _pagination_request_handler(
    _request: Request, exc: PaginationRequestError
) -> JSONResponse:
    """Report every failing query parameter.

    Returns 422 with ``{"errors": {parameter: [messages]}}``.
    """
    return JSONResponse(
        status_code=422,
        content={"errors": exc.errors},
    )


async def _not_registered_handler(
    _request: Request, exc: SchemaNotRegisteredError
) -> JSONResponse:
    return JSONResponse(
        status_code=404,
        content={"detail": str(exc)},
    )


async def _schema_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle schema errors surfacing at request time.

    These mean an entity was registered incorrectly, so the client gets a
    generic 500 and the details go to the server log.
    """
    logger.error(
        "Schema error on %s %s: %s", request.method, request.url.path, exc
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "An internal server error occurred."},
    )


async def _unhandled_exception_handler(
    request: Request, _exc: Exception
) -> JSONResponse:
    """Catch-all handler for unexpected exceptions.

    Logs the full traceback server-side but returns only a generic
    message to the client.
    """
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"detail": "An internal server error occurred."},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all centralized exception handlers on the FastAPI app.

    Args:
        app: The FastAPI application instance.
    """
    # 422 Unprocessable Entity (covers UnknownOrderFieldError and
    # MalformedParameterError)
    app.add_exception_handler(PaginationRequestError, _pagination_request_handler)

    # 404 Not Found
    app.add_exception_handler(SchemaNotRegisteredError, _not_registered_handler)

    # 500 for schema configuration errors
    for exc_class in _SCHEMA_EXCEPTIONS:
        app.add_exception_handler(exc_class, _schema_handler)

    # Catch-all for unhandled exceptions (must be registered last)
    app.add_exception_handler(Exception, _unhandled_exception_handler)

    logger.info("Registered centralized exception handlers")
