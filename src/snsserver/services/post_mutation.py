"""Create, update and delete operations on posts."""
from __future__ import annotations

import logging
from collections.abc import Iterable

from fastapi import UploadFile
from sqlalchemy.orm import Session

from snsserver.core.settings import settings
from snsserver.db.time import utcnow
from snsserver.models.post import Post
from snsserver.models.tag import PostTag
from snsserver.repositories import LikeRepository, MemberRepository, PostRepository, TagRepository
from snsserver.schemas.post import PostRequest, PostResponse
from snsserver.services.errors import ForbiddenError, IdentityResolutionError, NotFoundError
from snsserver.services.file_store import FileStore, has_content
from snsserver.services.post_assembler import PostAssembler
from snsserver.services.tag_store import TagStore

logger = logging.getLogger(__name__)


class PostMutationService:
    """Orchestrate post writes together with their tags and attached file.

    Each public operation is one unit of work: database changes are committed
    once at the end and rolled back on any failure. File store calls happen
    outside that unit of work and are not undone by a rollback.
    """

    def __init__(
        self,
        session: Session,
        file_store: FileStore,
        *,
        post_repo: PostRepository | None = None,
        tag_repo: TagRepository | None = None,
        member_repo: MemberRepository | None = None,
        assembler: PostAssembler | None = None,
    ) -> None:
        self.session = session
        self.file_store = file_store
        self.post_repo = post_repo or PostRepository(session)
        self.member_repo = member_repo or MemberRepository(session)
        self.tag_store = TagStore(tag_repo or TagRepository(session))
        self.assembler = assembler or PostAssembler(LikeRepository(session))

    def create(
        self,
        request: PostRequest,
        file: UploadFile | None,
        principal: str,
    ) -> PostResponse:
        """Create a post owned by ``principal``.

        Raises:
            IdentityResolutionError: If ``principal`` is not a known member.
            FileStoreError: If the attached file cannot be stored.
        """
        member = self.member_repo.get_by_username(principal)
        if member is None:
            raise IdentityResolutionError(f"Member not found: {principal}")

        file_path = self.file_store.upload(file, settings.file_category_post)
        try:
            post = Post(
                title=request.title,
                content=request.content,
                file_path=file_path,
                member=member,
                created_at=utcnow(),
            )
            self.post_repo.save(post)
            self._attach_tags(post, request.tags)
            self.session.commit()
        except Exception:
            self.session.rollback()
            if file_path:
                logger.warning("Post creation rolled back; stored file %s is orphaned", file_path)
            raise

        logger.info("Member %s created post %s", principal, post.id)
        return self.assembler.to_response(post)

    def update(
        self,
        post_id: int,
        request: PostRequest,
        file: UploadFile | None,
        principal: str,
    ) -> PostResponse:
        """Replace the title, content, tags and optionally the file of a post.

        Tags are replaced wholesale: every existing association is removed
        before the requested ones are attached.

        Raises:
            NotFoundError: If the post does not exist.
            ForbiddenError: If ``principal`` does not own the post.
        """
        post = self._load_owned(post_id, principal, action="update")

        previous_path = post.file_path
        file_path = self._replace_file(previous_path, file)
        try:
            post.post_tags.clear()
            post.title = request.title
            post.content = request.content
            post.file_path = file_path
            self.post_repo.save(post)
            self._attach_tags(post, request.tags)
            self.session.commit()
        except Exception:
            self.session.rollback()
            if file_path != previous_path:
                if previous_path:
                    logger.warning(
                        "Post %s update rolled back after its previous file %s was removed",
                        post_id,
                        previous_path,
                    )
                if file_path:
                    logger.warning(
                        "Post %s update rolled back; stored file %s is orphaned",
                        post_id,
                        file_path,
                    )
            raise

        logger.info("Member %s updated post %s", principal, post_id)
        return self.assembler.to_response(post)

    def delete(self, post_id: int, principal: str) -> None:
        """Delete a post and its stored file.

        Raises:
            NotFoundError: If the post does not exist.
            ForbiddenError: If ``principal`` does not own the post.
        """
        post = self._load_owned(post_id, principal, action="delete")

        file_path = post.file_path
        self.file_store.delete(file_path)
        try:
            self.post_repo.delete(post)
            self.session.commit()
        except Exception:
            self.session.rollback()
            if file_path:
                logger.warning(
                    "Post %s deletion rolled back after its file %s was removed",
                    post_id,
                    file_path,
                )
            raise

        logger.info("Member %s deleted post %s", principal, post_id)

    def _load_owned(self, post_id: int, principal: str, *, action: str) -> Post:
        post = self.post_repo.get_by_id(post_id)
        if post is None:
            raise NotFoundError(f"Post not found: {post_id}")
        if post.member.username != principal:
            logger.warning("Member %s may not %s post %s", principal, action, post_id)
            raise ForbiddenError(f"Only the owner can {action} this post")
        return post

    def _replace_file(self, existing_path: str | None, file: UploadFile | None) -> str | None:
        if not has_content(file):
            return existing_path
        self.file_store.delete(existing_path)
        return self.file_store.upload(file, settings.file_category_post)

    def _attach_tags(self, post: Post, tag_names: Iterable[str | None] | None) -> None:
        if tag_names is None:
            return
        for name in tag_names:
            # Blank names are skipped; duplicates are attached as given.
            if name is None or not name.strip():
                continue
            tag = self.tag_store.resolve_or_create(name)
            post.post_tags.append(PostTag(tag=tag))
