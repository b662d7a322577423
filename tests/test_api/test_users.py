"""Tests for user and authentication API endpoints."""

from datetime import timedelta

import pytest
from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from journal_api.config import get_settings
from journal_api.models.user import User
from journal_api.utils.dates import utcnow

PASSWORD = "securepassword123"


async def register(client: AsyncClient, username: str, password: str = PASSWORD) -> dict:
    """Register a user and return the response body."""
    response = await client.post(
        "/api/user/register",
        json={
            "username": username,
            "email": f"{username.lower()}@example.com",
            "password": password,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestRegister:
    """Tests for user registration endpoint."""

    async def test_register_success(self, client: AsyncClient) -> None:
        """Test successful user registration applies defaults."""
        data = await register(client, "Alice")

        assert data["username"] == "alice"
        assert data["displayName"] == "alice"
        assert data["email"] == "alice@example.com"
        assert data["gender"] == "Other"
        assert data["avatar"] == get_settings().default_avatar
        assert data["isActivated"] is False
        assert data["isDeleted"] is False
        assert data["updatedDatetime"] is None
        assert "createdDatetime" in data
        # Password should NOT be in response
        assert "password" not in data
        assert "hashedPassword" not in data

    async def test_register_creates_empty_relationship(self, client: AsyncClient) -> None:
        """Registration creates a relationship record with four empty lists."""
        await register(client, "alice")

        response = await client.get("/api/relationship/alice")

        assert response.status_code == 200
        assert response.json() == {
            "username": "alice",
            "following": [],
            "followers": [],
            "blocked": [],
            "friends": [],
        }

    async def test_register_duplicate_username_case_insensitive(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        """A username differing only in case is rejected and the original kept."""
        await register(client, "alice")

        response = await client.post(
            "/api/user/register",
            json={"username": "ALICE", "email": "other@example.com", "password": "anotherpassword"},
        )

        assert response.status_code == 409
        assert response.json()["detail"] == "Username already exists"

        result = await db_session.execute(select(User).where(User.username == "alice"))
        users = result.scalars().all()
        assert len(users) == 1
        assert users[0].email == "alice@example.com"

    async def test_register_invalid_email(self, client: AsyncClient) -> None:
        """Test registration with invalid email format."""
        response = await client.post(
            "/api/user/register",
            json={"username": "alice", "email": "not-an-email", "password": PASSWORD},
        )
        assert response.status_code == 400

    async def test_register_password_too_short(self, client: AsyncClient) -> None:
        """Test registration with password that is too short."""
        response = await client.post(
            "/api/user/register",
            json={"username": "alice", "email": "alice@example.com", "password": "short"},
        )
        assert response.status_code == 400

    async def test_register_reserved_prefix_rejected(self, client: AsyncClient) -> None:
        """Usernames cannot start with the search prefix."""
        response = await client.post(
            "/api/user/register",
            json={"username": "@alice", "email": "alice@example.com", "password": PASSWORD},
        )
        assert response.status_code == 400


class TestGetUser:
    """Tests for user lookup endpoint."""

    async def test_get_user_simple(self, client: AsyncClient) -> None:
        """By default only the display projection is returned."""
        await register(client, "alice")

        response = await client.get("/api/user/alice")

        assert response.status_code == 200
        assert response.json() == {
            "username": "alice",
            "displayName": "alice",
            "avatar": get_settings().default_avatar,
        }

    async def test_get_user_details(self, client: AsyncClient, db_session: AsyncSession) -> None:
        """details=true adds email, gender and account age in days."""
        await register(client, "alice")
        result = await db_session.execute(select(User).where(User.username == "alice"))
        user = result.scalar_one()
        user.created_datetime = utcnow() - timedelta(days=3, hours=1)
        await db_session.commit()

        response = await client.get("/api/user/alice", params={"details": "true"})

        assert response.status_code == 200
        data = response.json()
        assert data["email"] == "alice@example.com"
        assert data["gender"] == "Other"
        assert data["createdDays"] == 3

    async def test_get_user_not_found(self, client: AsyncClient) -> None:
        """Unknown usernames are 404."""
        response = await client.get("/api/user/nobody")
        assert response.status_code == 404
        assert "nobody" in response.json()["detail"]


class TestSearchUsers:
    """Tests for user search endpoint."""

    async def test_search_by_exact_username(self, client: AsyncClient) -> None:
        """An @-prefixed query returns a single user."""
        await register(client, "alice")

        response = await client.get("/api/user/search/@alice")

        assert response.status_code == 200
        assert response.json()["username"] == "alice"

    async def test_search_by_exact_username_not_found(self, client: AsyncClient) -> None:
        """An @-prefixed query for an unknown user is 404."""
        response = await client.get("/api/user/search/@ghost")
        assert response.status_code == 404

    async def test_search_by_display_name(self, client: AsyncClient) -> None:
        """Plain queries match display name substrings and return a list."""
        await register(client, "alice")
        await register(client, "malice")
        await register(client, "bob")

        response = await client.get("/api/user/search/lic")

        assert response.status_code == 200
        usernames = sorted(user["username"] for user in response.json())
        assert usernames == ["alice", "malice"]

    async def test_search_by_display_name_paginated(self, client: AsyncClient) -> None:
        """page and size apply to display name search."""
        for name in ("user1", "user2", "user3"):
            await register(client, name)

        response = await client.get("/api/user/search/user", params={"page": 1, "size": 2})

        assert response.status_code == 200
        assert [user["username"] for user in response.json()] == ["user3"]

    async def test_search_by_display_name_is_case_sensitive(self, client: AsyncClient) -> None:
        """Display name matching respects case, as journal search does."""
        await register(client, "alice")

        assert (await client.get("/api/user/search/ALI")).status_code == 404
        response = await client.get("/api/user/search/ali")
        assert [user["username"] for user in response.json()] == ["alice"]

    async def test_search_no_match(self, client: AsyncClient) -> None:
        """An empty result is reported as 404."""
        response = await client.get("/api/user/search/zzz")
        assert response.status_code == 404


class TestUpdateUser:
    """Tests for profile update endpoint."""

    async def test_update_user_success(self, client: AsyncClient) -> None:
        """Display name, avatar and email change; password in body is ignored."""
        await register(client, "alice")

        response = await client.put(
            "/api/user/alice",
            json={
                "username": "alice",
                "displayName": "Alice Liddell",
                "avatar": "/img/alice.png",
                "email": "liddell@example.com",
                "password": "newpassword123",
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["displayName"] == "Alice Liddell"
        assert data["avatar"] == "/img/alice.png"
        assert data["email"] == "liddell@example.com"
        assert data["updatedDatetime"] is not None

        # Old password still works
        login = await client.post(
            "/api/user/login", json={"username": "alice", "password": PASSWORD}
        )
        assert login.status_code == 200

    async def test_update_user_partial(self, client: AsyncClient) -> None:
        """Fields left out of the body keep their value."""
        await register(client, "alice")

        response = await client.put(
            "/api/user/alice", json={"username": "alice", "displayName": "Al"}
        )

        assert response.status_code == 200
        assert response.json()["email"] == "alice@example.com"

    async def test_update_user_username_mismatch(self, client: AsyncClient) -> None:
        """Body username must match the path."""
        await register(client, "alice")

        response = await client.put("/api/user/alice", json={"username": "bob"})

        assert response.status_code == 400

    async def test_update_user_not_found(self, client: AsyncClient) -> None:
        """Updating an unknown user is 404."""
        response = await client.put("/api/user/ghost", json={"username": "ghost"})
        assert response.status_code == 404


class TestDeleteUser:
    """Tests for user deletion endpoint."""

    async def test_delete_user(self, client: AsyncClient) -> None:
        """Deleting removes the user but leaves the relationship record."""
        await register(client, "alice")

        response = await client.delete("/api/user/alice")

        assert response.status_code == 204
        assert (await client.get("/api/user/alice")).status_code == 404
        assert (await client.get("/api/relationship/alice")).status_code == 200

    async def test_delete_user_not_found(self, client: AsyncClient) -> None:
        """Deleting an unknown user is 404."""
        response = await client.delete("/api/user/ghost")
        assert response.status_code == 404


class TestLogin:
    """Tests for login and logout endpoints."""

    async def test_login_success(self, client: AsyncClient) -> None:
        """Test successful login returns user summary and sets the session cookie."""
        await register(client, "alice")

        response = await client.post(
            "/api/user/login", json={"username": "alice", "password": PASSWORD}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "success"
        assert data["message"] == "Login successful"
        assert data["user"] == {
            "username": "alice",
            "displayName": "alice",
            "avatar": get_settings().default_avatar,
        }
        assert get_settings().session_cookie_name in response.cookies

    @pytest.mark.parametrize(
        ("username", "password"),
        [("ghost", PASSWORD), ("alice", "wrongpassword")],
        ids=["unknown-user", "wrong-password"],
    )
    async def test_login_failure(self, client: AsyncClient, username: str, password: str) -> None:
        """Unknown user and wrong password produce the same 401."""
        await register(client, "alice")

        response = await client.post(
            "/api/user/login", json={"username": username, "password": password}
        )

        assert response.status_code == 401
        assert response.json() == {"status": "error", "message": "Invalid username or password"}
        assert get_settings().session_cookie_name not in response.cookies

    async def test_logout(self, client: AsyncClient) -> None:
        """Logout ends the session; the same cookie is refused afterwards."""
        await register(client, "alice")
        login = await client.post(
            "/api/user/login", json={"username": "alice", "password": PASSWORD}
        )
        name = get_settings().session_cookie_name
        cookie_header = {"Cookie": f"{name}={login.cookies[name]}"}
        client.cookies.clear()

        response = await client.post("/api/user/logout", headers=cookie_header)
        assert response.status_code == 204

        again = await client.post("/api/user/logout", headers=cookie_header)
        assert again.status_code == 401

    async def test_logout_without_session(self, client: AsyncClient) -> None:
        """Logout without a cookie is 401."""
        response = await client.post("/api/user/logout")
        assert response.status_code == 401

    async def test_logout_with_tampered_cookie(self, client: AsyncClient) -> None:
        """A cookie not signed with the server key is refused."""
        name = get_settings().session_cookie_name
        response = await client.post(
            "/api/user/logout", headers={"Cookie": f"{name}=not.a.token"}
        )
        assert response.status_code == 401
