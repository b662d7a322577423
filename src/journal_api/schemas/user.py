"""Pydantic schemas for user and authentication API endpoints."""

from pydantic import EmailStr, Field, field_validator

from journal_api.schemas.base import CamelModel, UtcDatetime


class SimpleUser(CamelModel):
    """Read-only display snapshot of a user.

    Embedded in relationship lists and comments. It is copied at the time
    the entry is created and never refreshed afterwards.
    """

    username: str = Field(description="Username")
    display_name: str | None = Field(default=None, description="Display name at snapshot time")
    avatar: str | None = Field(default=None, description="Avatar URI at snapshot time")


class UserCreate(CamelModel):
    """Schema for user registration."""

    username: str = Field(
        min_length=3,
        max_length=50,
        description="Unique username (3-50 characters), stored lowercased",
    )
    email: EmailStr = Field(description="Valid email address")
    password: str = Field(
        min_length=8,
        max_length=100,
        description="Password (8-100 characters)",
    )

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username contains only allowed characters."""
        if not v.replace("_", "").replace("-", "").isalnum():
            msg = "Username can only contain letters, numbers, underscores, and hyphens"
            raise ValueError(msg)
        return v


class UserUpdate(CamelModel):
    """Schema for profile updates.

    Only display name, avatar and email are applied. The username must match
    the path and is never changed; any password in the body is ignored.
    """

    username: str = Field(description="Username of the profile being updated")
    display_name: str | None = Field(default=None, max_length=100)
    avatar: str | None = Field(default=None, max_length=500)
    email: EmailStr | None = None


class UserResponse(CamelModel):
    """Response schema for user data (excludes password)."""

    username: str = Field(description="Username")
    email: str | None = Field(default=None, description="Email address")
    display_name: str = Field(description="Display name")
    avatar: str | None = Field(default=None, description="Avatar URI")
    gender: str = Field(description="Gender")
    created_datetime: UtcDatetime = Field(description="When the user was created")
    updated_datetime: UtcDatetime | None = Field(default=None, description="Last profile change")
    is_activated: bool = Field(description="Whether the account has been activated")
    is_deleted: bool = Field(description="Soft-delete flag")


class UserDetails(CamelModel):
    """Extended public profile returned by ``GET /api/user/{username}?details=true``."""

    username: str
    display_name: str
    email: str | None = None
    avatar: str | None = None
    gender: str
    created_days: int = Field(description="Whole days since the account was created")


class UserLogin(CamelModel):
    """Schema for user login request."""

    username: str = Field(description="Username")
    password: str = Field(description="Password")


class LoginResponse(CamelModel):
    """Successful login body."""

    status: str = "success"
    message: str = "Login successful"
    user: SimpleUser


class LoginFailure(CamelModel):
    """Rejected login body, shaped like the success body."""

    status: str = "error"
    message: str
