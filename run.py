"""Entry point for the Recipe Store API.

Serves the FastAPI application with uvicorn in the foreground.  Host
and port are read from the ``HOST`` and ``PORT`` environment variables
(defaults ``127.0.0.1`` and ``8080``); see
``recipe_store_api.app.core.config`` for the remaining settings.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from recipe_store_api.app.core.config import settings
from recipe_store_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Recipe Store API stopped")
