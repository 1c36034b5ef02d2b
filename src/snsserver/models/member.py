# src/snsserver/models/member.py
"""SQLAlchemy model for registered members."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from snsserver.db.session import Base
from snsserver.db.time import utcnow

if TYPE_CHECKING:
    from .post import Post


class Member(Base):
    """Account that owns posts, comments and likes."""

    __tablename__ = "member"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # Principal name carried by access tokens; compared case-sensitively.
    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    posts: Mapped[list[Post]] = relationship("Post", back_populates="member")
