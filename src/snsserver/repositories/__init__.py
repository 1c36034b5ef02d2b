"""Data access helpers for posts, tags, likes and members."""

from .like_repo import LikeRepository
from .member_repo import MemberRepository
from .post_repo import PostRepository
from .tag_repo import TagRepository

__all__ = ["LikeRepository", "MemberRepository", "PostRepository", "TagRepository"]
