"""
Main entrypoint for the User Directory API.

This module assembles the FastAPI application: logging, the user
store, request logging middleware, the error handlers and the routes.
``create_app`` builds a fresh application, which is also instantiated
at module import time as ``app`` so that it can be served directly::

    uvicorn user_directory_api.app.main:app --port 5100
"""

from fastapi import FastAPI

from .api.router import router
from .core.config import settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.middleware import RequestLoggingMiddleware
from .services.user_store import UserStore


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Each call gets its own ``UserStore`` seeded with the demo users, so
    separate instances never share data.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.store = UserStore.with_seed_data()

    app.add_middleware(RequestLoggingMiddleware)
    register_exception_handlers(app)
    app.include_router(router)

    return app


app = create_app()
