"""Entry point for the resource API server.

Starts the FastAPI application with Uvicorn.  Host, port and log level
come from the environment (``HOST``, ``PORT``, ``LOG_LEVEL``; see
``crud_api.app.core.config``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from crud_api.app import app
from crud_api.app.core.config import settings


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Server listening at http://%s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
