"""Filter builders for post listing queries."""
from __future__ import annotations

from sqlalchemy import ColumnElement, select

from snsserver.models.post import Post
from snsserver.models.tag import PostTag, Tag


def title_contains(keyword: str | None) -> ColumnElement[bool] | None:
    """Return a case-insensitive title substring filter, or None for a blank keyword.

    The keyword is matched as given, surrounding whitespace included."""
    if keyword is None or not keyword.strip():
        return None
    pattern = keyword.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return Post.title.ilike(f"%{pattern}%", escape="\\")


def tagged_with(tag: Tag) -> ColumnElement[bool]:
    """Return a filter matching posts linked to ``tag``.

    A subquery keeps each post to a single row even when it carries the same
    tag more than once.
    """
    return Post.id.in_(select(PostTag.post_id).where(PostTag.tag_id == tag.id))
