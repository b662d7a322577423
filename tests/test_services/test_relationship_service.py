"""Tests for the relationship service."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from journal_api.schemas.user import UserCreate
from journal_api.services.base import RelationshipNotFoundError, TargetNotFoundError
from journal_api.services.relationships import RelationshipService
from journal_api.services.users import UserService


async def register(db_session: AsyncSession, *usernames: str) -> None:
    """Register each of ``usernames``."""
    service = UserService(db_session)
    for name in usernames:
        await service.register(
            UserCreate(username=name, email=f"{name}@example.com", password="password123")
        )


class TestEdits:
    """Tests for list edits."""

    async def test_lists_are_independent(self, db_session: AsyncSession) -> None:
        """Each edit touches exactly one list on one record."""
        await register(db_session, "alice", "bob")
        service = RelationshipService(db_session)

        await service.follow("alice", "bob")
        await service.add_friend("alice", "bob")

        alice = await service.get("alice")
        bob = await service.get("bob")
        assert [e["username"] for e in alice.following] == ["bob"]
        assert [e["username"] for e in alice.friends] == ["bob"]
        assert alice.followers == []
        assert bob.followers == []
        assert bob.following == []

    async def test_snapshot_shape(self, db_session: AsyncSession) -> None:
        """Stored entries use the wire field names."""
        await register(db_session, "alice", "bob")
        service = RelationshipService(db_session)

        await service.add_follower("alice", "bob")

        assert (await service.get("alice")).followers == [
            {"username": "bob", "displayName": "bob", "avatar": "src/assets/user.svg"}
        ]

    async def test_remove_friend_noop(self, db_session: AsyncSession) -> None:
        """Removing an absent entry leaves the list as is."""
        await register(db_session, "alice", "bob")
        service = RelationshipService(db_session)
        await service.add_friend("alice", "bob")

        await service.remove_friend("alice", "carol")

        assert await service.friend_usernames("alice") == ["bob"]

    async def test_missing_target(self, db_session: AsyncSession) -> None:
        """Adding a nonexistent target raises TargetNotFoundError."""
        await register(db_session, "alice")

        with pytest.raises(TargetNotFoundError):
            await RelationshipService(db_session).follow("alice", "ghost")

    async def test_missing_record(self, db_session: AsyncSession) -> None:
        """Edits on a user without a record raise RelationshipNotFoundError."""
        await register(db_session, "bob")

        with pytest.raises(RelationshipNotFoundError):
            await RelationshipService(db_session).remove_follower("ghost", "bob")
