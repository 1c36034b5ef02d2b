"""Error categories raised by the post services.

The API layer maps each category to an HTTP status; the services themselves
never catch them.
"""
from __future__ import annotations


class PostServiceError(Exception):
    """Base exception for post service failures."""


class NotFoundError(PostServiceError):
    """Raised when a post or tag does not exist for the given identifier."""


class IdentityResolutionError(NotFoundError):
    """Raised when the authenticated principal maps to no known member."""


class ForbiddenError(PostServiceError):
    """Raised when the principal does not own the post being modified."""


class FileStoreError(PostServiceError):
    """Raised when the file store rejects or fails to persist a file."""
