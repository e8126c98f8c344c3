"""
Health endpoints for API v1.

``GET /health`` is a liveness probe and always answers while the
process is up.  ``GET /health/ready`` also queries the posts
collection and answers 503 when the store cannot be reached.
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from fastapi.concurrency import run_in_threadpool

from message_board_api.app.core.errors import PersistenceError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
async def health_check(request: Request) -> Dict[str, Any]:
    settings = request.app.state.settings
    return {
        "status": "ok",
        "service": settings.project_name,
        "version": settings.api_version,
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe; includes a round trip to the document store."""
    collection = request.app.state.post_service.collection
    try:
        total = await run_in_threadpool(collection.count)
    except PersistenceError:
        logger.warning("Readiness check failed: store unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready"},
        )
    return {"status": "ready", "posts": total}
