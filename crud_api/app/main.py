"""
Main entrypoint for the resource API.

This module assembles the FastAPI application: it sets up logging,
creates the per-application stores, registers the exception handlers
and the request logging middleware, and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app`` so that it can be run
with uvicorn, e.g.::

    uvicorn crud_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.endpoints import info
from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import add_request_logging, setup_logging
from .services.product_service import ProductStore
from .services.user_service import UserStore


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance with fresh, empty
        (or demo-seeded) stores.
    """
    settings = settings or default_settings
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.user_store = UserStore(id_strategy=settings.id_strategy)
    app.state.product_store = ProductStore(id_strategy=settings.id_strategy)
    if settings.seed_demo_data:
        app.state.user_store.seed()
        logger.info("Seeded %d demo users", len(app.state.user_store))

    register_exception_handlers(app, expose_errors=settings.expose_errors)
    add_request_logging(app)

    app.include_router(info.router, tags=["info"])
    app.include_router(api_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
