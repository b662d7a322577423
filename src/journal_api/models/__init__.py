"""SQLAlchemy ORM models."""

from journal_api.models.journal import Journal
from journal_api.models.relationship import UserRelationship
from journal_api.models.session import UserSession
from journal_api.models.user import User

__all__ = [
    "Journal",
    "User",
    "UserRelationship",
    "UserSession",
]
