"""Pydantic schemas for relationship API endpoints."""

from pydantic import Field

from journal_api.schemas.base import CamelModel
from journal_api.schemas.user import SimpleUser


class UserRelationshipResponse(CamelModel):
    """A user's full relationship record."""

    username: str = Field(description="Owner of this record")
    following: list[SimpleUser] = Field(default_factory=list)
    followers: list[SimpleUser] = Field(default_factory=list)
    blocked: list[SimpleUser] = Field(default_factory=list)
    friends: list[SimpleUser] = Field(default_factory=list)
