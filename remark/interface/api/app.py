"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI

from remark.config import Settings
from remark.interface.api.errors import register_error_handlers
from remark.interface.api.middleware import CORSHeadersMiddleware, ErrorBoundaryMiddleware
from remark.interface.api.responses import NoStoreJSONResponse
from remark.interface.api.routes import auth, comments, health, users
from remark.util.di.container import create_container, setup_di
from remark.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use (defaults to the production container)
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Remark API",
        description="Comment storage for the thesis reader: per-user documents, thread listings by scan",
        version="0.1.0",
        default_response_class=NoStoreJSONResponse,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    register_error_handlers(app_instance)

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    # Added last = outermost: CORS headers also land on error responses
    app_instance.add_middleware(ErrorBoundaryMiddleware)
    app_instance.add_middleware(CORSHeadersMiddleware, allow_origins=settings.cors_allow_list)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(users.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(comments.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
