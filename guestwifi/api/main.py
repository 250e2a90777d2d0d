"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures exception handlers, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from guestwifi.api.dependencies import init_app_state
from guestwifi.api.routes import INTERNAL_ERROR_MESSAGE
from guestwifi.api.routes import router as api_router
from guestwifi.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "wifi",
        "description": "Guest WiFi captive portal - Register guests and check form fields",
    },
]


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Explicit settings; defaults to the cached environment settings
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """
        FastAPI lifespan context manager.

        Manages application startup and shutdown:
        - Applies the configured log level
        - Builds the guest store and verification clients
        """
        app_settings = settings or get_settings()
        logging.getLogger("guestwifi").setLevel(app_settings.log_level.upper())

        logger.info("Starting application...")
        init_app_state(app, app_settings)
        logger.info(
            "Policies: access codes=%s, email verification=%s, name validation=%s",
            app_settings.access_code_policy,
            app_settings.email_verification_mode,
            "on" if app_settings.name_validation_enabled else "off",
        )
        logger.info("Application startup complete")

        yield

        # Guests are held in memory only and are dropped with the process
        logger.info(
            "Shutting down application (%d guest(s) discarded)",
            app.state.guest_repository.count(),
        )

    app = FastAPI(
        title="guestwifi",
        description="Guest WiFi captive portal registration API",
        version="0.1.0",
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )

    app.include_router(api_router, prefix="/api")
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/health")
    async def health_check(request: Request) -> dict[str, str | int]:
        """
        Health check endpoint.

        Returns 200 OK with the number of registered guests.
        """
        return {"status": "healthy", "guests": request.app.state.guest_repository.count()}

    return app


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Report malformed request bodies in the form's error shape.

    FastAPI answers 422 with its own layout by default; the signup form
    expects 400 with a field -> message mapping.
    """
    errors: dict[str, str] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = loc[0] if loc else "body"
        errors.setdefault(field, error.get("msg", "Invalid value"))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation failed", "errors": errors},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log the traceback, return an opaque 500."""
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR_MESSAGE},
    )


app = create_app()
