"""
Main entrypoint for the Message Board API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Importing the app here makes it easy to run with uvicorn
or another ASGI server, e.g.::

    uvicorn message_board_api.app.main:app --reload

The post service and its collection handle are created here and kept
on ``app.state``; routes obtain them through a dependency instead of
importing a module‑level singleton.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api.error_handlers import register_error_handlers
from .api.v1.router import router as v1_router
from .core.config import Settings, settings
from .core.db import get_database_path, init_db
from .core.document_store import DocumentCollection
from .core.logging_config import setup_logging
from .services.post_service import PostService

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the process‑wide ``settings``;
        tests pass their own to point at a temporary database.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    # Initialise logging before anything else so that the code below
    # can safely log messages.
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    database_path = get_database_path(app_settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Create the database file if needed and bring the schema up to date.
        version = init_db(database_path)
        logger.info(
            "%s started (env=%s, schema=%s, db=%s)",
            app_settings.project_name,
            app_settings.environment,
            version,
            database_path,
        )
        yield
        logger.info("%s shutting down", app_settings.project_name)

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.api_version,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.post_service = PostService(DocumentCollection("posts", database_path))

    register_error_handlers(app)
    app.include_router(v1_router, prefix=app_settings.api_prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
