"""Data access helpers for working with posts."""
from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.orm import Session

from snsserver.models.like import PostLike
from snsserver.models.post import Post
from snsserver.schemas.common import PageRequest

__all__ = ["PostRepository"]


class PostRepository:
    """Thin wrapper around database access for post entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, post_id: int) -> Post | None:
        """Return a post by identifier."""
        return self.session.get(Post, post_id)

    def save(self, post: Post) -> Post:
        """Stage ``post`` for insert or update and flush to obtain its identifier."""
        self.session.add(post)
        self.session.flush()
        return post

    def delete(self, post: Post) -> None:
        """Delete ``post``; tag links, comments and likes follow by cascade."""
        self.session.delete(post)
        self.session.flush()

    def find_page(
        self,
        page_request: PageRequest,
        criteria: ColumnElement[bool] | None = None,
    ) -> tuple[list[Post], int]:
        """Return one page of posts, newest first, and the total matching count.

        Args:
            page_request: Zero-based page number and page size.
            criteria: Optional filter applied to both the page and the count.
        """
        stmt = select(Post)
        count_stmt = select(func.count()).select_from(Post)
        if criteria is not None:
            stmt = stmt.where(criteria)
            count_stmt = count_stmt.where(criteria)

        stmt = (
            stmt.order_by(Post.created_at.desc(), Post.id.desc())
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        posts = list(self.session.scalars(stmt))
        total = self.session.scalar(count_stmt) or 0
        return posts, int(total)

    def count_likes_by_posts(self, posts: Sequence[Post]) -> list[tuple[int, int]]:
        """Return ``(post_id, like_count)`` pairs for every liked post in ``posts``.

        Posts without likes produce no row.
        """
        post_ids = [post.id for post in posts]
        if not post_ids:
            return []
        stmt = (
            select(PostLike.post_id, func.count(PostLike.id))
            .where(PostLike.post_id.in_(post_ids))
            .group_by(PostLike.post_id)
        )
        return [(int(post_id), int(count)) for post_id, count in self.session.execute(stmt)]
