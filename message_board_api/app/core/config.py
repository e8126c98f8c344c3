"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts without any setup.  ``MESSAGE_BOARD_ENV`` names the
environment (``development``, ``test``, ``production``...) and picks
the default database file, so separate environments never share
data unless ``DATABASE_URL`` says so.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Message Board API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    api_prefix: str = os.getenv("API_PREFIX", "/api/v1")
    environment: str = os.getenv("MESSAGE_BOARD_ENV", "development")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional file receiving a copy of the console log.
    log_file: str = os.getenv("LOG_FILE", "")

    # Address the HTTP listener binds to when started through ``run.py``.
    app_host: str = os.getenv("APP_HOST", "127.0.0.1")
    app_port: int = int(os.getenv("APP_PORT", "3000"))

    # Path of the SQLite file holding the document collections.  Empty
    # means ``message_board_<environment>.db``.  Relative paths are
    # resolved against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "")

    def __post_init__(self) -> None:
        if not self.database_url:
            self.database_url = f"message_board_{self.environment}.db"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
