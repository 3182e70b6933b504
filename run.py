"""Launch the Pokemon Catalog API with uvicorn.

Host and port come from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``3000``); see
``pokemon_catalog_api/app/core/config.py`` for everything else.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from pokemon_catalog_api.app.core.config import settings
from pokemon_catalog_api.app.main import app


def build_server() -> Server:
    """Build the uvicorn server for the catalog application."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    return Server(config)


async def main() -> None:
    """Serve the API until interrupted."""
    server = build_server()
    logging.getLogger(__name__).info("Serving on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
