"""
Post endpoints for API v1.

These routes expose a CRUD API over the ``posts`` collection.  Each
handler makes exactly one service call and maps its result onto an
HTTP status: a missing post yields 404, and so does a malformed id
(``InvalidPostId`` is translated by the handler registered in
``api.error_handlers``).
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status

from message_board_api.app.core.identifiers import PostId
from message_board_api.app.schemas.post import PostCreate, PostCreated, PostRead
from message_board_api.app.services.post_service import PostService

router = APIRouter()

POST_NOT_FOUND = "Post not found"


def get_post_service(request: Request) -> PostService:
    """Return the service instance wired onto the application."""
    return request.app.state.post_service


@router.get("", response_model=List[PostRead])
async def list_posts(service: PostService = Depends(get_post_service)) -> List[PostRead]:
    """Return all posts in storage order."""
    return await service.find_all()


@router.get("/{post_id}", response_model=PostRead)
async def get_post(post_id: str, service: PostService = Depends(get_post_service)) -> PostRead:
    """Retrieve a single post by ID.

    Returns HTTP 404 if the post is not found.
    """
    post = await service.find_by_id(post_id)
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=POST_NOT_FOUND)
    return post


@router.post("", response_model=PostCreated, status_code=status.HTTP_201_CREATED)
async def create_post(
    post_in: PostCreate,
    service: PostService = Depends(get_post_service),
) -> PostCreated:
    """Create a new post and respond with its generated id."""
    new_id = await service.create(post_in)
    return PostCreated(id=new_id)


@router.put("/{post_id}", response_model=PostRead)
async def update_post(
    post_id: str,
    post_in: PostCreate,
    service: PostService = Depends(get_post_service),
) -> PostRead:
    """Replace every field of an existing post.

    An ``_id`` in the body is ignored; the path decides which post is
    written.  Returns HTTP 404 and changes nothing if the post does
    not exist.
    """
    updated = await service.update(post_in, post_id)
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=POST_NOT_FOUND)
    return PostRead(id=str(PostId.parse(post_id)), **post_in.model_dump())


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(post_id: str, service: PostService = Depends(get_post_service)) -> None:
    """Delete a post by ID."""
    deleted = await service.remove(post_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=POST_NOT_FOUND)
    return None
