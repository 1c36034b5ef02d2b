# src/snsserver/models/__init__.py
"""SQLAlchemy models for the SNS server."""

from .comment import Comment
from .like import PostLike
from .member import Member
from .post import Post
from .tag import PostTag, Tag

__all__ = [
    "Comment",
    "Member",
    "Post",
    "PostLike",
    "PostTag", "Tag",
]
