"""Entry point for serving the Recipe Store API.

This script starts the FastAPI application with uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Host, port and log level are read from the environment through
``Settings`` (``HOST``, ``PORT``, ``LOG_LEVEL``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from recipe_store_api.app.core.config import settings
from recipe_store_api.app.main import app


def build_server(host: str = settings.host, port: int = settings.port) -> Server:
    """Return a uvicorn server bound to ``host``/``port`` for ``app``."""
    config = Config(
        app=app,
        host=host,
        port=port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    return Server(config)


async def main() -> None:
    """Serve the API until interrupted."""
    server = build_server()
    logging.getLogger(__name__).info("Serving %s on %s:%s", settings.project_name, settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
