"""Data access helpers for post likes."""
from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from snsserver.models.like import PostLike

__all__ = ["LikeRepository"]


class LikeRepository:
    """Read access to like rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def count_by_post_id(self, post_id: int) -> int:
        """Return the number of likes recorded for a single post."""
        stmt = select(func.count(PostLike.id)).where(PostLike.post_id == post_id)
        return int(self.session.scalar(stmt) or 0)
