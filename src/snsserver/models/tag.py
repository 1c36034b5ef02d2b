# src/snsserver/models/tag.py
"""Models for tags and their association with posts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from snsserver.db.session import Base

if TYPE_CHECKING:
    from .post import Post


class Tag(Base):
    """Named label shared across posts. Never deleted by the post service."""

    __tablename__ = "tag"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Exact, case-sensitive match.
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)

    post_tags: Mapped[list[PostTag]] = relationship("PostTag", back_populates="tag")


class PostTag(Base):
    """Join row linking one post to one tag.

    (post_id, tag_id) is intentionally not unique: repeating a name within a
    single request yields repeated associations.
    """

    __tablename__ = "post_tag"
    __table_args__ = (
        Index("ix_post_tag_post_id", "post_id"),
        Index("ix_post_tag_tag_id", "tag_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=False,
    )
    tag_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tag.id"),
        nullable=False,
    )

    post: Mapped[Post] = relationship("Post", back_populates="post_tags")
    tag: Mapped[Tag] = relationship("Tag", back_populates="post_tags")
