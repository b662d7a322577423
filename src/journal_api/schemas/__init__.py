"""Pydantic schemas for request/response validation."""

from journal_api.schemas.base import CamelModel, MessageResponse
from journal_api.schemas.journal import (
    Comment,
    CommentCreate,
    JournalCreate,
    JournalResponse,
    JournalUpdate,
)
from journal_api.schemas.relationship import UserRelationshipResponse
from journal_api.schemas.user import (
    LoginFailure,
    LoginResponse,
    SimpleUser,
    UserCreate,
    UserDetails,
    UserLogin,
    UserResponse,
    UserUpdate,
)

__all__ = [
    "CamelModel",
    "MessageResponse",
    # User schemas
    "SimpleUser",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "UserDetails",
    "UserLogin",
    "LoginFailure",
    "LoginResponse",
    # Relationship schemas
    "UserRelationshipResponse",
    # Journal schemas
    "Comment",
    "CommentCreate",
    "JournalCreate",
    "JournalUpdate",
    "JournalResponse",
]
