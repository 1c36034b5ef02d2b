"""Data access helpers for tags."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from snsserver.models.tag import Tag

__all__ = ["TagRepository"]


class TagRepository:
    """Lookup and persistence for tag rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_name(self, name: str) -> Tag | None:
        """Return the tag with exactly ``name``, if any."""
        return self.session.scalars(select(Tag).where(Tag.name == name)).first()

    def save(self, tag: Tag) -> Tag:
        self.session.add(tag)
        self.session.flush()
        return tag
