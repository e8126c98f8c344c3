"""
Pydantic schemas for posts.

A post is a titled, authored, dated text item with a vote counter.
Clients never choose the identifier: ``PostCreate`` has no id field
and silently drops an ``_id`` sent in the body, while ``PostRead``
exposes the store‑generated id under the ``_id`` key.
"""

import datetime

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    """Schema for creating a post or replacing all of its fields."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., description="Title of the post")
    author: str = Field(..., description="Name of the author")
    date: datetime.date = Field(..., description="Publication date in YYYY-MM-DD format")
    summary: str = Field("", description="Short summary; may be empty")
    votes: int = Field(0, description="Vote counter")


class PostRead(PostCreate):
    """Schema for reading a stored post."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Store‑generated identifier")


class PostCreated(BaseModel):
    """Response body returned after a post has been created."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
