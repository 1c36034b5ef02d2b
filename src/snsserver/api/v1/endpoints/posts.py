# src/snsserver/api/v1/endpoints/posts.py
"""Post-related endpoints for the SNS API."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Query, Response, UploadFile, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from snsserver.api.v1.dependencies import (
    PostMutationServiceDep,
    PostQueryServiceDep,
    PrincipalDep,
)
from snsserver.core.settings import settings
from snsserver.schemas.common import PageRequest, PageResponse
from snsserver.schemas.post import (
    PostRequest,
    PostResponse,
    SearchPostByTagRequest,
    SearchPostRequest,
)

router = APIRouter(prefix="/posts", tags=["posts"])

PageQuery = Annotated[int, Query(ge=0, description="Zero-based page number")]
SizeQuery = Annotated[
    int,
    Query(ge=1, le=settings.max_page_size, description="Number of posts per page"),
]


def post_request_form(
    title: Annotated[str, Form()],
    content: Annotated[str, Form()],
    tags: Annotated[list[str] | None, Form()] = None,
) -> PostRequest:
    """Build a PostRequest from multipart form fields."""
    try:
        return PostRequest(title=title, content=content, tags=tags or [])
    except ValidationError as err:
        raise RequestValidationError(err.errors()) from err


PostForm = Annotated[PostRequest, Depends(post_request_form)]
FileField = Annotated[UploadFile | None, File(description="Optional attachment")]


@router.post("/", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    principal: PrincipalDep,
    service: PostMutationServiceDep,
    request: PostForm,
    file: FileField = None,
) -> PostResponse:
    """Create a post owned by the authenticated member.

    Args:
        principal: Username of the authenticated caller
        service: Post mutation service
        request: Title, content and tag names from the form
        file: Optional attachment

    Returns:
        The created post
    """
    return service.create(request, file, principal)


@router.get("/", response_model=PageResponse[PostResponse])
def list_posts(
    service: PostQueryServiceDep,
    page: PageQuery = 0,
    size: SizeQuery = settings.default_page_size,
) -> PageResponse[PostResponse]:
    """List posts newest first."""
    return service.list_all(PageRequest(page=page, size=size))


@router.get("/search", response_model=PageResponse[PostResponse])
def search_posts(
    service: PostQueryServiceDep,
    keyword: Annotated[str, Query(max_length=255)] = "",
    page: PageQuery = 0,
    size: SizeQuery = settings.default_page_size,
) -> PageResponse[PostResponse]:
    """Search posts by a substring of their title."""
    search = SearchPostRequest(keyword=keyword, page=page, size=size)
    return service.search_by_keyword(search.keyword, search.page, search.size)


@router.get("/search/tag", response_model=PageResponse[PostResponse])
def search_posts_by_tag(
    service: PostQueryServiceDep,
    tag: Annotated[str, Query(min_length=1, max_length=100)],
    page: PageQuery = 0,
    size: SizeQuery = settings.default_page_size,
) -> PageResponse[PostResponse]:
    """Search posts carrying an exact tag name.

    Raises:
        NotFoundError: If the tag does not exist (mapped to 404)
    """
    search = SearchPostByTagRequest(tag=tag, page=page, size=size)
    return service.search_by_tag(search.tag, search.page, search.size)


@router.get("/{post_id}", response_model=PostResponse)
def get_post(post_id: int, service: PostQueryServiceDep) -> PostResponse:
    """Get a specific post by ID."""
    return service.get_one(post_id)


@router.put("/{post_id}", response_model=PostResponse)
def update_post(
    post_id: int,
    principal: PrincipalDep,
    service: PostMutationServiceDep,
    request: PostForm,
    file: FileField = None,
) -> PostResponse:
    """Replace a post's title, content and tags, and optionally its file.

    Raises:
        NotFoundError: If the post does not exist (mapped to 404)
        ForbiddenError: If the caller does not own the post (mapped to 403)
    """
    return service.update(post_id, request, file, principal)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(
    post_id: int,
    principal: PrincipalDep,
    service: PostMutationServiceDep,
) -> Response:
    """Delete a post owned by the caller, together with its file."""
    service.delete(post_id, principal)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
