"""
FastAPI application entry point for the WEB 420 RESTful APIs.

This module provides the application factory with:
- Composer, person, customer, team and session routers under the API prefix
- Health, readiness and Prometheus metrics endpoints
- Request logging with correlation ids
- Exception handlers mapping domain and store errors to ``{"message": ...}``
- Document store lifecycle (connect on startup, close on shutdown)
"""

import structlog
import uvicorn
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict, Any, Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.middleware.cors import CORSMiddleware

from prometheus_client import CONTENT_TYPE_LATEST

from api.src.config import get_settings, Settings
from api.src.errors import ApiError
from api.src.middleware import RequestLoggingMiddleware
from api.src.repositories.document_store import DocumentStore
from api.src.routers import composers, customers, persons, session, teams
from shared.logging import configure_logging
from shared.metrics import get_metrics_handler, setup_metrics

# Initialize logger
logger = structlog.get_logger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into ``field: reason; ...``."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "Validation Exception: " + "; ".join(parts)


# ============================================================================
# Lifespan Management
# ============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager for startup and shutdown events.

    Handles:
    - Document store connection
    - Graceful shutdown and resource cleanup
    """
    settings: Settings = app.state.settings
    store: DocumentStore = app.state.document_store

    logger.info(
        "application_starting",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment
    )

    try:
        await store.connect()

        logger.info(
            "application_started",
            app_name=settings.app_name,
            version=settings.app_version,
            environment=settings.environment
        )

        yield

    except Exception as e:
        logger.error("application_startup_failed", error=str(e), exc_info=True)
        raise

    finally:
        logger.info("application_shutting_down")
        await store.close()
        logger.info("application_shutdown_complete")


# ============================================================================
# FastAPI Application
# ============================================================================

def create_app(
    settings: Optional[Settings] = None,
    document_store: Optional[DocumentStore] = None
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Application settings (defaults to the cached settings)
        document_store: Store to use (defaults to one built from settings)

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    configure_logging(
        log_level=settings.log_level,
        json_logs=settings.json_logs,
        service_name=settings.app_name,
        environment=settings.environment
    )

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description=(
            "CRUD endpoints for composers, persons, customers and invoices, "
            "teams and players, plus user signup and login."
        ),
        docs_url="/api-docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.document_store = document_store or DocumentStore.from_settings(settings)

    metrics = setup_metrics()

    # ========================================================================
    # Middleware Configuration
    # ========================================================================

    if settings.cors_enabled:
        logger.info("configuring_cors", origins=settings.cors_origins)
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=settings.cors_allow_credentials,
            allow_methods=settings.cors_allow_methods,
            allow_headers=settings.cors_allow_headers,
        )

    app.add_middleware(RequestLoggingMiddleware, metrics=metrics)

    # ========================================================================
    # Exception Handlers
    # ========================================================================

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        """Handle domain and store errors."""
        status_code = exc.status_for(settings.strict_status_codes)
        if status_code >= 500:
            logger.error(
                "store_exception",
                path=request.url.path,
                status_code=status_code,
                error=exc.message
            )
        else:
            logger.warning(
                "domain_exception",
                path=request.url.path,
                status_code=status_code,
                error=exc.message
            )
        return JSONResponse(
            status_code=status_code,
            content={"message": exc.message}
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle request validation errors."""
        logger.warning(
            "validation_error",
            path=request.url.path,
            errors=exc.errors()
        )
        status_code = (
            422
            if settings.strict_status_codes
            else status.HTTP_501_NOT_IMPLEMENTED
        )
        return JSONResponse(
            status_code=status_code,
            content={"message": _validation_message(exc)}
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.error(
            "unexpected_exception",
            path=request.url.path,
            error=str(exc),
            exc_info=True
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": f"Server Exception: {exc}"}
        )

    # ========================================================================
    # Health and Readiness Endpoints
    # ========================================================================

    @app.get("/health", tags=["Health"], response_class=JSONResponse)
    async def health_check() -> Dict[str, Any]:
        """
        Health check endpoint.

        Returns basic health status without checking dependencies.
        """
        return {
            "status": "healthy",
            "service": settings.app_name,
            "version": settings.app_version,
            "environment": settings.environment
        }

    @app.get("/ready", tags=["Health"], response_class=JSONResponse)
    async def readiness_check(request: Request):
        """
        Readiness check endpoint.

        Returns 503 when the document store does not answer a ping.
        """
        store: DocumentStore = request.app.state.document_store
        store_healthy = await store.ping()

        return JSONResponse(
            status_code=status.HTTP_200_OK if store_healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "ready" if store_healthy else "not_ready",
                "service": settings.app_name,
                "version": settings.app_version,
                "checks": {"document_store": "healthy" if store_healthy else "unhealthy"}
            }
        )

    if settings.metrics_enabled:
        metrics_handler = get_metrics_handler(metrics.registry)

        @app.get("/metrics", tags=["Monitoring"], response_class=PlainTextResponse)
        async def metrics_endpoint() -> Response:
            """Prometheus metrics endpoint."""
            return Response(content=metrics_handler(), media_type=CONTENT_TYPE_LATEST)

    # ========================================================================
    # API Router Registration
    # ========================================================================

    for router_module in (composers, persons, customers, teams, session):
        app.include_router(router_module.router, prefix=settings.api_prefix)

    return app


app = create_app()


# ============================================================================
# Application Entry Point
# ============================================================================

if __name__ == "__main__":
    settings = get_settings()

    logger.info(
        "starting_uvicorn_server",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )

    uvicorn.run(
        "api.src.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
        access_log=True,
    )
