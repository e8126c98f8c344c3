"""Entry point for the Message Board API server.

Starts uvicorn with the application from
``message_board_api.app.main``.  Host and port come from ``APP_HOST``
and ``APP_PORT`` (see ``message_board_api.app.core.config``); set
``MESSAGE_BOARD_ENV`` to choose the environment and its default
database.  uvicorn itself reports the listening address once the
socket is bound.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from message_board_api.app.core.config import Settings, settings
from message_board_api.app.main import app


def build_config(app_settings: Settings = settings) -> Config:
    """Return the uvicorn configuration for ``app_settings``."""
    return Config(
        app=app,
        host=app_settings.app_host,
        port=app_settings.app_port,
        reload=False,
        log_level=app_settings.log_level.lower(),
    )


async def main() -> None:
    """Serve the API until interrupted."""
    server = Server(build_config())
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
