"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers, shared
catalog/library handles. No business logic here (SRP). See app.core.lifespan
and app.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and optionally
clear get_settings cache) before importing or calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from app.api import api_router
from app.core.config import get_settings
from app.core.exception_handlers import register_exception_handlers
from app.core.lifespan import create_lifespan
from app.infrastructure.catalog import InMemoryCatalog
from app.infrastructure.library import InMemoryLibrary
from app.infrastructure.rendering import TemplateRenderer
from app.middleware import NoCacheMiddleware, RequestIDMiddleware, TimeoutMiddleware
from app.shared.telemetry import setup_logging


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    setup_logging()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    # Shared, process-wide handles; requests only read them.
    app.state.catalog = InMemoryCatalog()
    app.state.library = InMemoryLibrary()
    app.state.renderer = TemplateRenderer(
        settings.template_dir, url_prefix=settings.url_prefix
    )

    register_exception_handlers(app)

    # Middleware: last added = outermost. Order: timeout → request ID → no-cache → CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["GET", "HEAD"],
        allow_headers=["*"],
    )
    app.add_middleware(NoCacheMiddleware, path_prefix=f"{settings.url_prefix}/browse")
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.add_middleware(TimeoutMiddleware, timeout_seconds=settings.request_timeout_seconds)

    app.include_router(api_router, prefix=settings.url_prefix)

    browse_url = f"{settings.url_prefix}/browse/"

    @app.api_route("/", methods=["GET", "HEAD"], include_in_schema=False)
    def root() -> RedirectResponse:
        """Redirect to the browse index."""
        return RedirectResponse(url=browse_url, status_code=301)

    return app


app = create_app()
