"""Business logic for users, relationships and journals."""

from journal_api.services.base import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    NotFoundError,
    RelationshipNotFoundError,
    ServiceError,
    TargetNotFoundError,
    UserNotFoundError,
    ValidationError,
)
from journal_api.services.journals import JournalService, get_journal_service
from journal_api.services.relationships import RelationshipService, get_relationship_service
from journal_api.services.users import UserService, get_user_service

__all__ = [
    "DuplicateUsernameError",
    "InvalidCredentialsError",
    "NotFoundError",
    "RelationshipNotFoundError",
    "ServiceError",
    "TargetNotFoundError",
    "UserNotFoundError",
    "ValidationError",
    "JournalService",
    "get_journal_service",
    "RelationshipService",
    "get_relationship_service",
    "UserService",
    "get_user_service",
]
