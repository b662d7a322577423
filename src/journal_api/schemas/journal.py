"""Pydantic schemas for journal API endpoints."""

from pydantic import Field, field_validator

from journal_api.schemas.base import CamelModel, UtcDatetime
from journal_api.schemas.user import SimpleUser


class CommentCreate(CamelModel):
    """Schema for posting a comment on a journal."""

    simple_user: SimpleUser = Field(description="Snapshot of the commenter")
    content: str = Field(description="Comment text")


class Comment(CamelModel):
    """A comment embedded in a journal.

    ``replies`` has the same shape recursively; nothing writes to it yet.
    """

    id: str = Field(description="Comment ID")
    simple_user: SimpleUser
    content: str
    replies: list["Comment"] = Field(default_factory=list)
    created_datetime: UtcDatetime


class JournalCreate(CamelModel):
    """Schema for creating a journal."""

    title: str = Field(description="Journal title")
    content: str = Field(description="Journal body")
    username: str = Field(description="Author username")
    user_avatar: str | None = Field(default=None, description="Author avatar at posting time")

    @field_validator("title", "content")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only text."""
        if not v.strip():
            msg = "must not be blank"
            raise ValueError(msg)
        return v


class JournalUpdate(CamelModel):
    """Schema for editing a journal. Omitted or null fields are left alone."""

    title: str | None = None
    content: str | None = None


class JournalResponse(CamelModel):
    """Response schema for a journal."""

    id: str = Field(description="Journal ID")
    title: str
    content: str
    username: str = Field(description="Author username")
    user_avatar: str | None = None
    likes: list[str] = Field(default_factory=list, description="Usernames, repeats allowed")
    comments: list[Comment] = Field(default_factory=list)
    created_datetime: UtcDatetime
    updated_datetime: UtcDatetime
    is_deleted: bool
