"""Batched like counts for a page of posts."""
from __future__ import annotations

from collections.abc import Sequence

from snsserver.models.post import Post
from snsserver.repositories.post_repo import PostRepository


class LikeAggregator:
    """Compute like counts for many posts with a single query."""

    def __init__(self, post_repo: PostRepository) -> None:
        self.post_repo = post_repo

    def count_for(self, posts: Sequence[Post]) -> dict[int, int]:
        """Return a ``post_id -> like count`` map for ``posts``.

        Posts without likes are absent from the map; callers default to 0.
        """
        return dict(self.post_repo.count_likes_by_posts(posts))
