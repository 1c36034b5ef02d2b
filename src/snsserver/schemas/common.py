"""Shared Pydantic schemas for pagination."""
from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Generic, TypeVar

from pydantic import BaseModel, Field, field_validator

from snsserver.core.settings import settings

T = TypeVar("T")


class PageRequest(BaseModel):
    """Zero-based page selector used by list endpoints."""

    page: int = Field(0, ge=0, description="Zero-based page number")
    size: int = Field(
        default_factory=lambda: settings.default_page_size,
        ge=1,
        description="Number of items per page",
    )

    @field_validator("size")
    @classmethod
    def _within_max_page_size(cls, value: int) -> int:
        if value > settings.max_page_size:
            raise ValueError(f"size must be at most {settings.max_page_size}")
        return value

    @property
    def offset(self) -> int:
        """Return the row offset of the first item on this page."""
        return self.page * self.size


class PageResponse(BaseModel, Generic[T]):
    """Page of results plus the metadata needed to navigate the full set."""

    content: list[T]
    page: int
    size: int
    total_elements: int
    total_pages: int
    first: bool
    last: bool

    @classmethod
    def build(
        cls,
        content: Sequence[T],
        page_request: PageRequest,
        total_elements: int,
    ) -> PageResponse[T]:
        """Assemble a page envelope from its content and the overall row count."""
        total_pages = math.ceil(total_elements / page_request.size) if total_elements else 0
        return cls(
            content=list(content),
            page=page_request.page,
            size=page_request.size,
            total_elements=total_elements,
            total_pages=total_pages,
            first=page_request.page == 0,
            last=page_request.page >= total_pages - 1,
        )
