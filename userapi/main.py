"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here (SRP). See userapi.core.lifespan and
userapi.core.exception_handlers.

Settings are resolved inside create_app() (or passed in) and stored on
app.state so that tests can build an app with their own Settings.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from userapi.api.router import api_router, health_router
from userapi.core.config import Settings, get_settings
from userapi.core.exception_handlers import register_exception_handlers
from userapi.core.lifespan import create_lifespan
from userapi.middleware import (
    AccessLogMiddleware,
    RecoveryMiddleware,
    TimeoutMiddleware,
)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build and return the FastAPI application."""
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )
    app.state.settings = settings

    register_exception_handlers(app)

    # Middleware: last added = outermost. Order: CORS → access log → recovery → timeout → app.
    app.add_middleware(TimeoutMiddleware, timeout_seconds=settings.server_write_timeout)
    app.add_middleware(RecoveryMiddleware)
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api")
    app.include_router(health_router)

    return app
