"""Conversion of post entities to API responses."""
from __future__ import annotations

from collections.abc import Mapping

from snsserver.models.post import Post
from snsserver.repositories.like_repo import LikeRepository
from snsserver.schemas.post import PostResponse


class PostAssembler:
    """Build ``PostResponse`` objects from posts and their like counts."""

    def __init__(self, like_repo: LikeRepository) -> None:
        self.like_repo = like_repo

    def to_response(
        self,
        post: Post,
        like_counts: Mapping[int, int] | None = None,
    ) -> PostResponse:
        """Convert a Post ORM instance to an API schema.

        Args:
            post: The post to render.
            like_counts: Precomputed counts for a page of posts. When omitted the
                count is looked up for this post alone.
        """
        if like_counts is None:
            like_count = self.like_repo.count_by_post_id(post.id)
        else:
            like_count = like_counts.get(post.id, 0)

        return PostResponse(
            id=post.id,
            title=post.title,
            content=post.content,
            file_path=post.file_path,
            username=post.member.username,
            created_at=post.created_at,
            like_count=like_count,
            comment_count=len(post.comments),
            tags=[post_tag.tag.name for post_tag in post.post_tags],
        )
