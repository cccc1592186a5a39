"""FastAPI application."""

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tally.interface.api.routes import votes
from tally.interface.error import NOT_FOUND_MESSAGE, error_response
from tally.util.di.container import create_container, setup_di
from tally.util.observability import instrument_fastapi


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Unknown paths and unsupported methods are both reported as 404."""
    if exc.status_code in (
        status.HTTP_404_NOT_FOUND,
        status.HTTP_405_METHOD_NOT_ALLOWED,
    ):
        logfire.warn(
            "Unknown request", path=request.url.path, method=request.method
        )
        return error_response(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)
    return error_response(exc.status_code, str(exc.detail))


def _describe_error(error: dict) -> str:
    """Name the offending body field, or fall back to the error message."""
    parts = [
        str(part)
        for part in error["loc"]
        if part != "body" and isinstance(part, str)
    ]
    return ".".join(parts) or error["msg"]


async def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed or incomplete vote payloads are client errors."""
    fields = ", ".join(_describe_error(error) for error in exc.errors())
    logfire.warn("Invalid vote request", path=request.url.path, fields=fields)
    return error_response(
        status.HTTP_400_BAD_REQUEST, f"Invalid vote request: {fields}"
    )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it.

    Args:
        container: DI container; the production container is built when omitted
    """
    app_instance = FastAPI(
        title="Tally API",
        description="Records votes cast by Slack users for categorized submissions",
        version="0.1.0",
        # The vote endpoint is the whole public surface
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_exception_handler(
        StarletteHTTPException, _http_exception_handler
    )
    app_instance.add_exception_handler(
        RequestValidationError, _validation_exception_handler
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(votes.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
