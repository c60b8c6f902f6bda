"""Entry point for the OptiCore mock server.

Serves the API and the static front end with Uvicorn.  Intended to be
executed from the directory holding the HTML/CSS/JS assets, since that
directory is served at ``/`` by default.

Configuration (``HOST``, ``PORT``, ``STATIC_DIR``, ``LOG_LEVEL``...) is
read from the environment or a ``.env`` file in the same directory.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from opticore_api.app.core.config import settings
from opticore_api.app.main import app


logger = logging.getLogger("opticore_api")


async def run_server() -> None:
    """Start the API using Uvicorn on ``settings.host:settings.port``."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        access_log=False,
    )
    server = Server(config)
    logger.info("KIREI OptiCore mock server listening on port %s", settings.port)
    await server.serve()


def main() -> None:
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
