"""
Service layer for posts.

``PostService`` mediates between the HTTP routes and the ``posts``
document collection.  It validates identifiers (raising
``InvalidPostId`` for malformed ones), turns "no such post" into
``None`` or ``False`` rather than an error, and only ever returns
freshly built ``PostRead`` objects: mutating a returned post has no
effect on what later calls return.

The service holds no state besides its collection handle, which is
passed in explicitly by the application factory.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError

from message_board_api.app.core.document_store import DocumentCollection
from message_board_api.app.core.errors import PersistenceError
from message_board_api.app.core.identifiers import PostId
from message_board_api.app.schemas.post import PostCreate, PostRead

logger = logging.getLogger(__name__)


class PostService:
    """Service class for managing posts.

    Collection calls are blocking SQLite statements; each one runs in
    the threadpool so the event loop keeps serving other requests while
    a query is in flight.
    """

    def __init__(self, collection: DocumentCollection) -> None:
        self.collection = collection

    async def find_all(self) -> List[PostRead]:
        """Return all posts in storage order."""
        docs = await run_in_threadpool(self.collection.find_all)
        return [self._to_post(doc) for doc in docs]

    async def find_by_id(self, post_id: str) -> Optional[PostRead]:
        """Retrieve a single post.

        Raises ``InvalidPostId`` if ``post_id`` is malformed and returns
        ``None`` if no post has that id.
        """
        parsed = PostId.parse(post_id)
        doc = await run_in_threadpool(self.collection.find_by_id, parsed)
        if doc is None:
            return None
        return self._to_post(doc)

    async def create(self, post: PostCreate) -> str:
        """Persist a new post and return its generated id."""
        new_id = await run_in_threadpool(self.collection.insert_one, post.model_dump(mode="json"))
        logger.info("Created post %s", new_id)
        return str(new_id)

    async def update(self, post: PostCreate, post_id: str) -> bool:
        """Overwrite every field of an existing post.

        Returns ``True`` if the post existed, ``False`` otherwise; in the
        latter case nothing is written.
        """
        parsed = PostId.parse(post_id)
        updated = await run_in_threadpool(
            self.collection.replace_by_id, parsed, post.model_dump(mode="json")
        )
        if updated:
            logger.info("Updated post %s", parsed)
        return updated

    async def remove(self, post_id: str) -> bool:
        """Delete a post by id.

        Returns ``True`` if a post was deleted, ``False`` otherwise.
        """
        parsed = PostId.parse(post_id)
        deleted = await run_in_threadpool(self.collection.delete_by_id, parsed)
        if deleted:
            logger.info("Deleted post %s", parsed)
        return deleted

    def _to_post(self, doc: Dict[str, Any]) -> PostRead:
        try:
            return PostRead.model_validate(doc)
        except ValidationError as exc:
            logger.error("Stored post %s does not match the schema: %s", doc.get("_id"), exc)
            raise PersistenceError(f"Stored post {doc.get('_id')!r} is malformed") from exc
