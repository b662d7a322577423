"""Security utilities for password hashing and login sessions.

A login creates a ``UserSession`` row keyed by an opaque random token. The
cookie handed to the client is a signed JWT carrying that token (``sid``)
and the username (``sub``), so a cookie is only honoured while its session
row exists and has not expired.
"""

import secrets
from datetime import timedelta
from functools import lru_cache
from typing import Annotated

import bcrypt
from fastapi import Depends, HTTPException, Request, status
from jose import JWTError, jwt
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from journal_api.config import get_settings
from journal_api.database import get_db
from journal_api.models.session import UserSession
from journal_api.utils.dates import as_utc, utcnow


def hash_password(password: str) -> str:
    """Hash a plain text password using bcrypt."""
    password_bytes = password.encode("utf-8")
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(password_bytes, salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain text password against a hashed password."""
    password_bytes = plain_password.encode("utf-8")
    hashed_bytes = hashed_password.encode("utf-8")
    return bcrypt.checkpw(password_bytes, hashed_bytes)


@lru_cache
def dummy_password_hash() -> str:
    """Hash checked against when the user does not exist, to keep timing uniform."""
    return hash_password(secrets.token_urlsafe(16))


def create_session_cookie(
    username: str, session_id: str, expires_delta: timedelta | None = None
) -> str:
    """Create the signed cookie value for a session.

    Args:
        username: Owner of the session, stored as the "sub" claim.
        session_id: Opaque server-side session token, stored as "sid".
        expires_delta: Optional custom lifetime. Defaults to settings value.

    Returns:
        Encoded JWT string
    """
    settings = get_settings()
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.session_expire_minutes)

    claims = {"sub": username, "sid": session_id, "exp": utcnow() + expires_delta}
    return jwt.encode(claims, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_session_cookie(token: str) -> dict | None:
    """Decode and validate a session cookie.

    Returns:
        Decoded claims if valid, None if invalid or expired
    """
    settings = get_settings()
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


async def start_session(db: AsyncSession, username: str) -> str:
    """Persist a new session for ``username`` and return its cookie value."""
    settings = get_settings()
    lifetime = timedelta(minutes=settings.session_expire_minutes)
    now = utcnow()

    session = UserSession(
        token=secrets.token_urlsafe(32),
        username=username,
        created_at=now,
        expires_at=now + lifetime,
    )
    db.add(session)
    await db.flush()

    return create_session_cookie(username, session.token, lifetime)


async def get_current_session(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> UserSession:
    """Resolve the request's session cookie to a live session.

    This is a FastAPI dependency.

    Raises:
        HTTPException 401: If the cookie is missing, invalid, expired,
            or its session has been closed
    """
    settings = get_settings()
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not logged in",
    )

    cookie = request.cookies.get(settings.session_cookie_name)
    if not cookie:
        raise credentials_exception

    claims = decode_session_cookie(cookie)
    if claims is None or "sid" not in claims:
        raise credentials_exception

    result = await db.execute(select(UserSession).where(UserSession.token == claims["sid"]))
    session = result.scalar_one_or_none()

    if session is None or session.username != claims.get("sub"):
        raise credentials_exception
    if as_utc(session.expires_at) <= utcnow():
        raise credentials_exception

    return session


# Type alias for use in route dependencies
CurrentSession = Annotated[UserSession, Depends(get_current_session)]
