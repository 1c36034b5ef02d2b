"""Data access helpers for members."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from snsserver.models.member import Member

__all__ = ["MemberRepository"]


class MemberRepository:
    """Resolve principals to member rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_username(self, username: str) -> Member | None:
        """Return the member registered under ``username``."""
        return self.session.scalars(select(Member).where(Member.username == username)).first()
