"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from loguru import logger

from layered_users import __version__
from layered_users.api.http.app_data import ApplicationDependencies, build_dependencies
from layered_users.api.http.routers.health import router as health_router
from layered_users.api.http.routers.user import router as user_router
from layered_users.runtime.logging_config import configure_logging
from layered_users.runtime.settings import Settings, get_settings

__all__ = ["create_app"]


async def log_requests(request: Request, call_next):
    # Ensure every request is tagged with an ID for debugging
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()
    response = None

    with logger.contextualize(request_id=request_id):
        try:
            response = await call_next(request)
            response.headers.setdefault("X-Request-ID", request_id)
            return response
        finally:
            duration_ms = (time.perf_counter() - start) * 1000
            status_code = getattr(response, "status_code", "ERR")
            logger.info(
                "{} {} -> {} in {:.1f}ms",
                request.method,
                request.url.path,
                status_code,
                duration_ms,
            )


def create_app(
    settings: Settings | None = None,
    app_dependencies: ApplicationDependencies | None = None,
) -> FastAPI:
    """Build the HTTP application.

    Args:
        settings: Settings to use; read from the environment when omitted.
        app_dependencies: Pre-built dependencies, mainly for tests. Built
            from ``settings`` when omitted.

    Returns:
        FastAPI: The configured application with the user routes mounted.
    """
    settings = settings or get_settings()
    configure_logging(settings)
    settings.validate_runtime()

    if app_dependencies is None:
        app_dependencies = build_dependencies(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting application in {} mode", settings.environment)
        try:
            yield
        finally:
            logger.info("Shutting down application")
            app.state.app_dependencies.close()

    is_production = settings.environment == "production"
    app = FastAPI(
        title="layered-users",
        version=__version__,
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
    )
    app.state.app_dependencies = app_dependencies

    app.middleware("http")(log_requests)
    app.include_router(health_router)
    app.include_router(user_router)
    return app
