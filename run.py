"""Serve the User Directory API with uvicorn.

Host and port come from ``settings`` (``HOST`` and ``PORT``
environment variables, defaulting to ``0.0.0.0`` and ``5100``).
uvicorn's own logging config is disabled; its messages go through the
handlers installed by ``setup_logging``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from user_directory_api.app.core.config import settings
from user_directory_api.app.main import app


logger = logging.getLogger(__name__)


async def announce_when_started(server: Server, serving: "asyncio.Task[None]") -> None:
    """Log the listening address once the socket is bound."""
    while not server.started and not serving.done():
        await asyncio.sleep(0.05)
    if server.started:
        logger.info("Server is running on http://localhost:%s", settings.port)


async def main() -> None:
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    serving = asyncio.create_task(server.serve())
    await announce_when_started(server, serving)
    await serving


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
