# src/snsserver/services/__init__.py
"""Business logic services for posts, tags and likes."""

from .errors import (
    FileStoreError,
    ForbiddenError,
    IdentityResolutionError,
    NotFoundError,
    PostServiceError,
)
from .file_store import FileStore, LocalFileStore
from .like_aggregator import LikeAggregator
from .post_assembler import PostAssembler
from .post_mutation import PostMutationService
from .post_query import PostQueryService
from .tag_store import TagStore

__all__ = [
    "FileStore", "LocalFileStore",
    "LikeAggregator",
    "PostAssembler",
    "PostMutationService",
    "PostQueryService",
    "TagStore",
    "PostServiceError", "NotFoundError", "IdentityResolutionError",
    "ForbiddenError", "FileStoreError",
]
