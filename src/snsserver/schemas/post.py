# src/snsserver/schemas/post.py
"""Post-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .common import PageRequest


class PostRequest(BaseModel):
    """Schema for creating or replacing a post."""

    title: str = Field(..., min_length=1, max_length=255, description="Post title")
    content: str = Field(..., min_length=1, description="Post body")
    tags: list[str | None] = Field(
        default_factory=list,
        description="Tag names; blank entries are ignored",
    )


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: int
    title: str
    content: str
    file_path: str | None
    username: str
    created_at: datetime
    like_count: int
    comment_count: int
    tags: list[str]

    model_config = ConfigDict(from_attributes=True)


class SearchPostRequest(PageRequest):
    """Title keyword search over posts."""

    keyword: str = Field("", max_length=255, description="Substring to match in titles")


class SearchPostByTagRequest(PageRequest):
    """Search for posts carrying an exact tag name."""

    tag: str = Field(..., min_length=1, max_length=100, description="Exact tag name")
