"""Identity and credential service."""

import logging

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from journal_api.config import get_settings
from journal_api.database import get_db
from journal_api.models.user import User
from journal_api.schemas.user import UserCreate, UserUpdate
from journal_api.services.base import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    UserNotFoundError,
)
from journal_api.services.relationships import RelationshipService
from journal_api.utils.dates import utcnow
from journal_api.utils.security import dummy_password_hash, hash_password, verify_password

logger = logging.getLogger(__name__)

# Search queries starting with this are exact username lookups
USERNAME_PREFIX = "@"

DEFAULT_GENDER = "Other"


class UserService:
    """Owns user records: lookup, search, registration, profile edits, login checks."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self.relationships = RelationshipService(db)

    async def find_by_username(self, username: str) -> User | None:
        """Exact-match lookup. Returns None when absent."""
        result = await self.db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def search_by_display_name(self, query: str, page: int, size: int) -> list[User]:
        """Find users whose display name contains ``query``, case-sensitively.

        A query of the form ``@name`` is an exact username lookup instead and
        yields at most one user. LIKE narrows the rows in SQL; the exact
        check and the page slice run here.

        Args:
            query: Display name fragment, or ``@`` followed by a username.
            page: Zero-based page number.
            size: Page size.
        """
        if query.startswith(USERNAME_PREFIX):
            user = await self.find_by_username(query[len(USERNAME_PREFIX) :])
            return [user] if user else []

        result = await self.db.execute(
            select(User)
            .where(User.display_name.contains(query, autoescape=True))
            .order_by(User.username)
        )
        matches = [user for user in result.scalars().all() if query in user.display_name]
        return matches[page * size : (page + 1) * size]

    async def register(self, candidate: UserCreate) -> User:
        """Create a user and its empty relationship record.

        Both rows are written in the caller's transaction, so a failure of
        either one rolls back the whole registration.

        Raises:
            DuplicateUsernameError: If the lowercased username is taken.
        """
        settings = get_settings()
        username = candidate.username.lower()

        if await self.find_by_username(username):
            raise DuplicateUsernameError(username)

        user = User(
            username=username,
            email=candidate.email,
            hashed_password=hash_password(candidate.password),
            display_name=username,
            gender=DEFAULT_GENDER,
            avatar=settings.default_avatar,
            created_datetime=utcnow(),
            updated_datetime=None,
            is_activated=False,
            is_deleted=False,
        )
        await self.relationships.create(username)
        self.db.add(user)

        try:
            await self.db.flush()
        except IntegrityError as e:
            # Lost a race with a concurrent registration of the same name
            raise DuplicateUsernameError(username) from e

        logger.info("Registered user %s", username)
        return user

    async def update(self, username: str, patch: UserUpdate) -> User:
        """Apply display name, avatar and email changes.

        Raises:
            UserNotFoundError: If no such user exists.
        """
        user = await self.find_by_username(username)
        if user is None:
            raise UserNotFoundError(username)

        if patch.display_name is not None:
            user.display_name = patch.display_name
        if patch.avatar is not None:
            user.avatar = patch.avatar
        if patch.email is not None:
            user.email = patch.email
        user.updated_datetime = utcnow()

        await self.db.flush()
        return user

    async def delete(self, username: str) -> bool:
        """Remove the user record. Relationship and journal records are kept."""
        user = await self.find_by_username(username)
        if user is None:
            return False

        await self.db.delete(user)
        await self.db.flush()
        logger.info("Deleted user %s", username)
        return True

    async def authenticate(self, username: str, password: str) -> User:
        """Check credentials and return the matching user.

        Raises:
            InvalidCredentialsError: If the user is unknown or the password
                does not match. Both cases are indistinguishable.
        """
        user = await self.find_by_username(username.lower())

        if user is None:
            verify_password(password, dummy_password_hash())
            logger.info("Failed login attempt for %s", username)
            raise InvalidCredentialsError()

        if not verify_password(password, user.hashed_password):
            logger.info("Failed login attempt for %s", username)
            raise InvalidCredentialsError()

        return user


async def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    """Factory function to create a user service.

    Can be used as a FastAPI dependency.
    """
    return UserService(db)
