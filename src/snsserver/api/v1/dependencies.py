"""Shared API dependencies for authentication and service wiring."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from snsserver.core.security import JWTError, decode_principal
from snsserver.db.session import get_db
from snsserver.services.file_store import FileStore, get_file_store
from snsserver.services.post_mutation import PostMutationService
from snsserver.services.post_query import PostQueryService

# HTTP Bearer scheme for JWT authentication
bearer_scheme = HTTPBearer()

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_file_store_dep() -> FileStore:
    """Return the file store used for post attachments."""
    return get_file_store()


FileStoreDep = Annotated[FileStore, Depends(get_file_store_dep)]


def get_current_principal(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer_scheme)],
) -> str:
    """Return the principal name carried by the bearer token.

    Raises:
        HTTPException: If the token is invalid or carries no subject
    """
    try:
        principal = decode_principal(credentials.credentials)
    except JWTError as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        ) from err
    if principal is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        )
    return principal


# Type alias for current principal dependency
PrincipalDep = Annotated[str, Depends(get_current_principal)]


def get_post_mutation_service(db: SessionDep, file_store: FileStoreDep) -> PostMutationService:
    return PostMutationService(db, file_store)


def get_post_query_service(db: SessionDep) -> PostQueryService:
    return PostQueryService(db)


PostMutationServiceDep = Annotated[PostMutationService, Depends(get_post_mutation_service)]
PostQueryServiceDep = Annotated[PostQueryService, Depends(get_post_query_service)]
