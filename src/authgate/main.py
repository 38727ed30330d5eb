"""
Main FastAPI application for AuthGate.

This module creates and configures the FastAPI application with all
middleware, routes, and error handlers.
"""

from __future__ import annotations

import time
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from .api import auth_router
from .core import (
    get_logger,
    get_settings,
    setup_logging,
    AuthGateError,
    ConfigurationError,
    generate_request_id,
    get_security_headers,
    log_error,
    log_request_start,
    log_request_end,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger = get_logger(__name__)
    settings = get_settings()

    setup_logging(settings.logging)

    logger.info(
        "Starting AuthGate",
        version=settings.app_version,
        environment=settings.environment,
        frontend_url=settings.frontend_url,
    )

    if not settings.github.client_id or not settings.github.client_secret:
        if settings.environment == "production":
            raise ConfigurationError(
                "GITHUB_CLIENT_ID and GITHUB_CLIENT_SECRET are required",
                error_code="missing_client_credentials",
            )
        logger.warning("GitHub client credentials are not configured")

    if not settings.cookie.secret_key:
        logger.warning("COOKIE_SECRET_KEY is not set, sessions will not survive a restart")

    if not settings.cookie.secure:
        logger.warning("Credential cookie is not marked Secure")

    yield

    # Shutdown
    logger.info("Shutting down AuthGate")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    # Create FastAPI app
    app = FastAPI(
        title=settings.app_name,
        description=settings.app_description,
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
    )

    # The frontend calls us with cookies, so origins must be explicit
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url, *settings.server.cors_origins],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # Add request logging middleware
    app.add_middleware(RequestLoggingMiddleware)

    # Include API routers
    app.include_router(auth_router)

    # Add health check endpoint
    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": settings.app_version,
            "timestamp": time.time()
        }

    # Add error handlers
    @app.exception_handler(AuthGateError)
    async def authgate_error_handler(request: Request, exc: AuthGateError):
        """Handle AuthGate errors without leaking provider detail."""
        logger = get_logger(__name__)
        context = exc.log_context()
        context.update(path=request.url.path, response_status=exc.status_code)
        logger.info("Request rejected", **context)
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict()
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle general exceptions."""
        logger = get_logger(__name__)
        log_error(
            logger,
            exc,
            context={
                "method": request.method,
                "path": request.url.path,
                "client": request.client.host if request.client else "unknown"
            }
        )

        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"}
        )

    return app


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging HTTP requests."""

    def __init__(self, app):
        super().__init__(app)
        self.logger = get_logger(__name__)

    async def dispatch(self, request: Request, call_next):
        """Process request with logging."""
        start_time = time.time()

        # Bind request ID for every log line emitted while handling this request
        request_id = generate_request_id()
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)

        client_ip = request.client.host if request.client else "unknown"
        user_agent = request.headers.get("user-agent")

        log_request_start(
            self.logger,
            method=request.method,
            path=request.url.path,
            client_ip=client_ip,
            user_agent=user_agent
        )

        try:
            try:
                response = await call_next(request)
            except Exception as e:
                self.logger.error(
                    "Request processing failed",
                    method=request.method,
                    path=request.url.path,
                    error=str(e)
                )
                raise

            for header, value in get_security_headers().items():
                response.headers.setdefault(header, value)
            response.headers["X-Request-ID"] = request_id

            log_request_end(
                self.logger,
                method=request.method,
                path=request.url.path,
                status_code=response.status_code,
                duration_ms=(time.time() - start_time) * 1000
            )
        finally:
            structlog.contextvars.unbind_contextvars("request_id")

        return response


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "authgate.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
        workers=settings.server.workers if not settings.server.reload else 1,
        log_level=settings.logging.level.lower(),
        access_log=False,  # We handle logging ourselves
    )
