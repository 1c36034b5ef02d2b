# src/snsserver/models/like.py
"""Models capturing like interactions on posts."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from snsserver.db.session import Base
from snsserver.db.time import utcnow


class PostLike(Base):
    """Per-member like on a post.

    Like counts are derived from these rows and never stored on the post.
    """

    __tablename__ = "post_like"
    __table_args__ = (
        # One like per member per post.
        UniqueConstraint("post_id", "member_id", name="uq_post_like_post_member"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    member_id: Mapped[int] = mapped_column(Integer, ForeignKey("member.id"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    post = relationship("Post", back_populates="likes")
