"""Read operations on posts: listing, search and single-post lookup."""
from __future__ import annotations

import logging

from sqlalchemy import ColumnElement
from sqlalchemy.orm import Session

from snsserver.repositories import LikeRepository, PostRepository, TagRepository
from snsserver.schemas.common import PageRequest, PageResponse
from snsserver.schemas.post import PostResponse
from snsserver.services.errors import NotFoundError
from snsserver.services.like_aggregator import LikeAggregator
from snsserver.services.post_assembler import PostAssembler
from snsserver.services.search import tagged_with, title_contains

logger = logging.getLogger(__name__)


class PostQueryService:
    """Serve pages of posts enriched with like counts.

    Each page costs one query for the posts, one for the total and one
    batched like-count query, whatever the page size.
    """

    def __init__(
        self,
        session: Session,
        *,
        post_repo: PostRepository | None = None,
        tag_repo: TagRepository | None = None,
        assembler: PostAssembler | None = None,
    ) -> None:
        self.post_repo = post_repo or PostRepository(session)
        self.tag_repo = tag_repo or TagRepository(session)
        self.like_aggregator = LikeAggregator(self.post_repo)
        self.assembler = assembler or PostAssembler(LikeRepository(session))

    def list_all(self, page_request: PageRequest) -> PageResponse[PostResponse]:
        """Return a page of all posts, newest first."""
        result = self._page(page_request)
        logger.info("Fetched %d posts", result.total_elements)
        return result

    def search_by_keyword(self, keyword: str, page: int, size: int) -> PageResponse[PostResponse]:
        """Return posts whose title contains ``keyword``, newest first."""
        logger.info("Searching posts with keyword: %s, page: %d, size: %d", keyword, page, size)
        result = self._page(PageRequest(page=page, size=size), title_contains(keyword))
        logger.info("Found %d posts matching keyword: %s", result.total_elements, keyword)
        return result

    def search_by_tag(self, tag_name: str, page: int, size: int) -> PageResponse[PostResponse]:
        """Return posts carrying the tag named exactly ``tag_name``.

        Raises:
            NotFoundError: If no tag has that name.
        """
        logger.info("Searching posts with tag: %s, page: %d, size: %d", tag_name, page, size)
        tag = self.tag_repo.find_by_name(tag_name)
        if tag is None:
            raise NotFoundError(f"Tag not found: {tag_name}")

        result = self._page(PageRequest(page=page, size=size), tagged_with(tag))
        logger.info("Found %d posts with tag: %s", result.total_elements, tag_name)
        return result

    def get_one(self, post_id: int) -> PostResponse:
        """Return a single post.

        Raises:
            NotFoundError: If the post does not exist.
        """
        post = self.post_repo.get_by_id(post_id)
        if post is None:
            raise NotFoundError(f"Post not found: {post_id}")
        return self.assembler.to_response(post)

    def _page(
        self,
        page_request: PageRequest,
        criteria: ColumnElement[bool] | None = None,
    ) -> PageResponse[PostResponse]:
        posts, total = self.post_repo.find_page(page_request, criteria)
        like_counts = self.like_aggregator.count_for(posts)
        content = [self.assembler.to_response(post, like_counts) for post in posts]
        return PageResponse[PostResponse].build(content, page_request, total)
