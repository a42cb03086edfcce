"""FastAPI application factory."""

import sys

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from meeting_summarizer.api_errors import INTERNAL_ERROR, ApiError
from meeting_summarizer.config import AppConfig
from meeting_summarizer.dependencies import Services, build_services
from meeting_summarizer.logging import setup_logging
from meeting_summarizer.routes import health_router, mail_router, summaries_router

logger = setup_logging()


def check_startup(config: AppConfig) -> None:
    """
    Validates credentials before the server starts.

    A missing Gemini API key terminates the process. Missing email
    credentials only log a warning, since summaries still work without them.
    """
    if not config.gemini.api_key:
        logger.error(
            "GEMINI_API_KEY is not set in environment variables",
            extra={"hint": "Set GEMINI_API_KEY in your environment or .env file"},
        )
        sys.exit(1)

    if not config.email.configured:
        logger.warning(
            "Email credentials not fully configured",
            extra={"hint": "Email functionality may not work properly"},
        )


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "Request failed",
            extra={
                "path": request.url.path,
                "error": exc.message,
                "details": exc.details,
            },
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def _validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body", "details": str(exc.errors())},
    )


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", extra={"path": request.url.path})
    return JSONResponse(
        status_code=500,
        content={"error": INTERNAL_ERROR, "details": str(exc)},
    )


def create_app(config: AppConfig, services: Services | None = None) -> FastAPI:
    """
    Builds the HTTP application for a configuration.

    Args:
        config: Immutable process configuration.
        services: Pre-built components; built from config when omitted.
    """
    app = FastAPI(title="AI Meeting Notes Summarizer")
    app.state.services = services or build_services(config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.server.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    app.include_router(health_router)
    app.include_router(summaries_router)
    app.include_router(mail_router)
    return app
