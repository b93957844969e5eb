"""FastAPI application main module."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from signal_scout.config import get_settings
from signal_scout.exceptions import AggregationError, InternalError, ScoutError, ValidationError
from signal_scout.middleware.request_logging import RequestLoggingMiddleware
from signal_scout.search_api import router as search_router
from signal_scout.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    setup_logging(level=settings.log_level, json_format=settings.log_json, log_file=settings.log_file)

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        description="Scout niche conversations across Reddit, Hacker News and Dev.to",
        debug=settings.debug,
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.include_router(search_router)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def body_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Undecodable or missing body
        return JSONResponse(status_code=400, content={"error": "Request body must be valid JSON"})

    @app.exception_handler(AggregationError)
    async def aggregation_error_handler(request: Request, exc: AggregationError) -> JSONResponse:
        return JSONResponse(
            status_code=502,
            content={"error": str(exc), "failures": [f.to_dict() for f in exc.failures]},
        )

    @app.exception_handler(InternalError)
    async def internal_error_handler(request: Request, exc: InternalError) -> JSONResponse:
        logger.error(f"Internal error on {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"error": "Internal error while scouting signals"})

    @app.exception_handler(ScoutError)
    async def scout_error_handler(request: Request, exc: ScoutError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"error": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "version": settings.app_version}

    return app


app = create_app()
