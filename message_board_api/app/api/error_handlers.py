"""
Global exception handlers for the Message Board API.

``InvalidPostId`` is answered exactly like a missing post (404), so
clients cannot tell a malformed id from an unknown one.
``PersistenceError`` becomes a 500 without leaking store details; it
is logged with its traceback.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from message_board_api.app.core.errors import InvalidPostId, PersistenceError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all application error handlers on the FastAPI app."""

    @app.exception_handler(InvalidPostId)
    async def invalid_post_id_handler(request: Request, exc: InvalidPostId):
        logger.debug("Rejected id on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": "Post not found"},
        )

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError):
        logger.error(
            "Store failure on %s %s: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )
