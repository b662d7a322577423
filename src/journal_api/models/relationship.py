"""User relationship ORM model."""

from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from journal_api.database import Base


class UserRelationship(Base):
    """Per-user social graph record.

    One row per username. Each list holds SimpleUser snapshots
    (``{"username", "displayName", "avatar"}``) taken when the entry was
    added; they are not refreshed when the source user changes.
    """

    __tablename__ = "user_relationships"

    id: Mapped[int] = mapped_column(primary_key=True)
    username: Mapped[str] = mapped_column(String(50), unique=True, index=True)
    following: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)
    followers: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)
    # Never written by any operation.
    blocked: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)
    friends: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)
