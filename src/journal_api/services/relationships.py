"""Relationship graph service.

Each user owns one ``UserRelationship`` record holding four independent
lists. Following someone does not touch their ``followers`` list; callers
wanting both sides issue both edits.
"""

import logging
from typing import Any

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from journal_api.database import get_db
from journal_api.models.relationship import UserRelationship
from journal_api.models.user import User
from journal_api.schemas.user import SimpleUser
from journal_api.services.base import RelationshipNotFoundError, TargetNotFoundError

logger = logging.getLogger(__name__)

RELATIONSHIP_LISTS = ("following", "followers", "blocked", "friends")


def snapshot(user: User) -> dict[str, Any]:
    """Build the stored SimpleUser snapshot for ``user``."""
    return SimpleUser(
        username=user.username,
        display_name=user.display_name,
        avatar=user.avatar,
    ).model_dump(mode="json", by_alias=True)


class RelationshipService:
    """Reads and edits users' relationship records.

    Edits are read-modify-write on the whole record. Appends do not check
    for an existing entry, so repeated follows accumulate duplicates;
    removals drop every entry for the target and are no-ops when it is
    absent.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def find(self, username: str) -> UserRelationship | None:
        """Return the relationship record for ``username``, if any."""
        result = await self.db.execute(
            select(UserRelationship).where(UserRelationship.username == username)
        )
        return result.scalar_one_or_none()

    async def get(self, username: str) -> UserRelationship:
        """Return the relationship record for ``username``.

        Raises:
            RelationshipNotFoundError: If the user has no record.
        """
        relationship = await self.find(username)
        if relationship is None:
            raise RelationshipNotFoundError(username)
        return relationship

    async def create(self, username: str) -> UserRelationship:
        """Stage an empty relationship record for a newly registered user.

        Deleting a user leaves its record behind, so re-registering the
        same username resets the leftover record instead of adding a second.
        The caller's session flush/commit persists it.
        """
        relationship = await self.find(username)
        if relationship is None:
            relationship = UserRelationship(username=username)
            self.db.add(relationship)
        else:
            logger.info("Resetting stale relationship record for %s", username)
        for field in RELATIONSHIP_LISTS:
            setattr(relationship, field, [])
        return relationship

    async def _append(self, username: str, target_username: str, field: str) -> UserRelationship:
        relationship = await self.get(username)

        result = await self.db.execute(select(User).where(User.username == target_username))
        target = result.scalar_one_or_none()
        if target is None:
            raise TargetNotFoundError(target_username)

        # Reassign so SQLAlchemy sees the JSON column change
        setattr(relationship, field, [*getattr(relationship, field), snapshot(target)])
        await self.db.flush()
        return relationship

    async def _remove(self, username: str, target_username: str, field: str) -> UserRelationship:
        relationship = await self.get(username)
        remaining = [
            entry for entry in getattr(relationship, field) if entry["username"] != target_username
        ]
        setattr(relationship, field, remaining)
        await self.db.flush()
        return relationship

    async def follow(self, username: str, target_username: str) -> UserRelationship:
        """Add ``target_username`` to ``username``'s following list."""
        return await self._append(username, target_username, "following")

    async def unfollow(self, username: str, target_username: str) -> UserRelationship:
        """Remove ``target_username`` from ``username``'s following list."""
        return await self._remove(username, target_username, "following")

    async def add_follower(self, username: str, target_username: str) -> UserRelationship:
        """Add ``target_username`` to ``username``'s followers list."""
        return await self._append(username, target_username, "followers")

    async def remove_follower(self, username: str, target_username: str) -> UserRelationship:
        """Remove ``target_username`` from ``username``'s followers list."""
        return await self._remove(username, target_username, "followers")

    async def add_friend(self, username: str, target_username: str) -> UserRelationship:
        """Add ``target_username`` to ``username``'s friends list."""
        return await self._append(username, target_username, "friends")

    async def remove_friend(self, username: str, target_username: str) -> UserRelationship:
        """Remove ``target_username`` from ``username``'s friends list."""
        return await self._remove(username, target_username, "friends")

    async def friend_usernames(self, username: str) -> list[str]:
        """Usernames in ``username``'s friends list, in list order."""
        relationship = await self.get(username)
        return [entry["username"] for entry in relationship.friends]


async def get_relationship_service(db: AsyncSession = Depends(get_db)) -> RelationshipService:
    """Factory function to create a relationship service.

    Can be used as a FastAPI dependency.
    """
    return RelationshipService(db)
