"""
Main entrypoint for the Recipe Store API.

This module assembles the FastAPI application, sets up logging,
registers error handlers and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn recipe_store_api.app.main:app --reload

or use ``run.py`` at the project root.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from .core.config import Settings, settings as default_settings
from .core.exceptions import (
    RecipeStoreError,
    recipe_store_error_handler,
    request_validation_error_handler,
)
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.recipe_service import RecipeStore


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each call creates a fresh ``RecipeStore``, seeded with sample
    recipes unless ``settings.seed_recipes`` is false.  The store lives
    on ``app.state.recipes`` for the lifetime of the application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the module‑level defaults read from
        the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.state.recipes = RecipeStore.with_seed() if settings.seed_recipes else RecipeStore()
    logger.info("Recipe store ready with %d recipes", len(app.state.recipes))

    app.add_exception_handler(RecipeStoreError, recipe_store_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    app.include_router(v1_router, prefix=settings.api_prefix.rstrip("/"))

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
