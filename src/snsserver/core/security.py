"""JWT helpers used to resolve the current principal."""
from __future__ import annotations

from datetime import timedelta

from jose import JWTError, jwt

from snsserver.core.settings import settings
from snsserver.db.time import utcnow

__all__ = ["JWTError", "create_access_token", "decode_principal"]


def create_access_token(username: str, expires_delta: timedelta | None = None) -> str:
    """Issue a signed access token whose subject is ``username``."""
    expire = utcnow() + (
        expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    )
    payload = {"sub": username, "exp": expire}
    return jwt.encode(payload, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_principal(token: str) -> str | None:
    """Return the principal name carried by ``token``.

    Raises:
        JWTError: If the token signature or expiry is invalid.
    """
    payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        return None
    return subject
