"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inkwell.config import AuthSettings, Settings
from inkwell.interface.api.routes import (
    blogs,
    comments,
    health,
    notifications,
    users,
)
from inkwell.interface.error import register_error_handlers
from inkwell.util.di.container import create_container, setup_di
from inkwell.util.error import ConfigurationError
from inkwell.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, configure in conftest.py if needed.

    Args:
        container: DI container to use. Defaults to the production container;
            tests pass one built with in-memory persistence.
    """
    settings = Settings()

    if (
        settings.environment == "production"
        and settings.auth.jwt_secret == AuthSettings().jwt_secret
    ):
        raise ConfigurationError("AUTH__JWT_SECRET must be set in production")

    app_instance = FastAPI(
        title="Inkwell API",
        description="Backend API for Inkwell - blogs, comment threads, likes and notifications",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(blogs.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(notifications.router)
    app_instance.include_router(users.router)

    return app_instance
