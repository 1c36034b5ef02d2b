# src/snsserver/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .common import PageRequest, PageResponse
from .post import PostRequest, PostResponse, SearchPostByTagRequest, SearchPostRequest

__all__ = [
    "PageRequest", "PageResponse",
    "PostRequest", "PostResponse",
    "SearchPostRequest", "SearchPostByTagRequest",
]
