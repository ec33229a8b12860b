"""FastAPI application factory for the apirelay proxy."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
import structlog
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from .config import Settings, settings
from .errors import ProxyError
from .middleware import PreflightMiddleware
from .routers import (
    dashboard_router,
    debug_router,
    health_router,
    proxy_router,
    status_router,
)


def configure_logging(app_settings: Settings, console: Optional[bool] = None) -> None:
    """Configure structlog for the service."""
    if console is None:
        console = app_settings.debug
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer()
            if console
            else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, app_settings.log_level.upper())
        ),
        logger_factory=structlog.WriteLoggerFactory(),
        cache_logger_on_first_use=True,
    )


async def proxy_error_handler(request: Request, exc: ProxyError) -> PlainTextResponse:
    """Render a forwarding failure as its fixed plain-text response."""
    return PlainTextResponse(exc.body, status_code=exc.status_code)


def create_app(
    app_settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    ``transport`` replaces the network transport of the shared upstream
    client, which lets tests stand in for the upstream APIs.
    """
    app_settings = app_settings or settings
    configure_logging(app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with httpx.AsyncClient(
            transport=transport,
            timeout=httpx.Timeout(app_settings.upstream_timeout),
            follow_redirects=False,
        ) as client:
            app.state.http_client = client
            yield

    # Initialize FastAPI app
    app = FastAPI(
        title="apirelay",
        description="Prefix-based reverse proxy for third-party API hosts",
        version="0.1.0",
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
        openapi_url="/openapi.json" if app_settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = app_settings

    app.add_middleware(PreflightMiddleware)
    app.add_exception_handler(ProxyError, proxy_error_handler)

    # Exact informational paths first, the catch-all proxy route last
    app.include_router(health_router)
    app.include_router(dashboard_router)
    app.include_router(debug_router)
    app.include_router(status_router)
    app.include_router(proxy_router)

    return app


# Create the app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apirelay.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
