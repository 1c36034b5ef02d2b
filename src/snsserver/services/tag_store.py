"""Lookup-or-create access to tags."""
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError

from snsserver.models.tag import Tag
from snsserver.repositories.tag_repo import TagRepository

logger = logging.getLogger(__name__)


class TagStore:
    """Resolve tag names to persisted tags, creating them on first use."""

    def __init__(self, tag_repo: TagRepository) -> None:
        self.tag_repo = tag_repo

    def resolve_or_create(self, name: str) -> Tag:
        """Return the tag called ``name``, inserting it if it does not exist yet.

        The insert runs in a savepoint so that losing a race against a
        concurrent insert of the same name only rolls back that insert; the
        winner's row is then fetched instead.
        """
        tag = self.tag_repo.find_by_name(name)
        if tag is not None:
            return tag

        session = self.tag_repo.session
        try:
            with session.begin_nested():
                tag = self.tag_repo.save(Tag(name=name))
        except IntegrityError:
            logger.info("Tag %r was created concurrently; re-fetching", name)
            tag = self.tag_repo.find_by_name(name)
            if tag is None:
                raise
            return tag

        logger.debug("Created tag %r (id=%s)", name, tag.id)
        return tag
