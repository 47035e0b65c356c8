"""
Main entrypoint for the Recipe Store API.

This module assembles the FastAPI application, sets up logging,
registers error handlers and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app here
makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn recipe_store_api.app.main:app --reload

The recipe store belongs to the application: it is created when the
app starts up and dropped when it shuts down.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.exceptions import register_exception_handlers
from .core.logging_config import setup_logging
from .services.recipe_service import RecipeStore


logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> RecipeStore:
    if settings.seed_recipes:
        return RecipeStore.with_seed_data()
    return RecipeStore()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    app.state.recipe_store = build_store(app.state.settings)
    logger.info("Recipe store ready with %d recipe(s)", len(app.state.recipe_store))
    try:
        yield
    finally:
        app.state.recipe_store.clear()
        app.state.recipe_store = None
        logger.info("Recipe store discarded")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module level settings
        read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.recipe_store = None

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
