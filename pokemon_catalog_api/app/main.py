"""
Main entrypoint for the Pokemon Catalog API.

This module assembles the FastAPI application: it sets up logging,
registers the error handlers, builds the catalog service and includes
the versioned routers.  The ``create_app`` function does the work; an
application instance is created at import time as ``app`` so it can
be served directly, e.g.::

    uvicorn pokemon_catalog_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .services.pokemon_service import PokemonService


def create_app(settings: Optional[Settings] = None, service: Optional[PokemonService] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.
    service : Optional[PokemonService]
        Catalog service to serve.  When omitted a new one is built from
        ``settings``, so every application owns an isolated catalog.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.pokemon_service = service or PokemonService.from_settings(settings)

    register_exception_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    logging.getLogger(__name__).info(
        "%s %s ready (not-found bound %s, cache limit %s)",
        settings.project_name,
        settings.api_version,
        settings.not_found_bound,
        settings.cache_max_entries or "none",
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
