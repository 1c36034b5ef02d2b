# src/snsserver/models/post.py
"""SQLAlchemy model for posts."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from snsserver.db.session import Base
from snsserver.db.time import utcnow

if TYPE_CHECKING:
    from .comment import Comment
    from .like import PostLike
    from .member import Member
    from .tag import PostTag


class Post(Base):
    """Primary content entity produced by members.

    Tag associations, comments and likes belong to the post and are removed
    together with it through the ORM cascade.
    """

    __tablename__ = "post"
    __table_args__ = (Index("ix_post_created_at", "created_at"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    # Reference handed out by the file store; null when no file was attached.
    file_path: Mapped[str | None] = mapped_column(String(512), nullable=True)
    member_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("member.id"),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    member: Mapped[Member] = relationship("Member", back_populates="posts")
    post_tags: Mapped[list[PostTag]] = relationship(
        "PostTag",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="PostTag.id",
    )
    comments: Mapped[list[Comment]] = relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete-orphan",
    )
    likes: Mapped[list[PostLike]] = relationship(
        "PostLike",
        back_populates="post",
        cascade="all, delete-orphan",
    )
