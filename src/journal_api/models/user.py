"""User ORM model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from journal_api.database import Base
from journal_api.utils.dates import utcnow


class User(Base):
    """User account model for authentication and profile display."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    username: Mapped[str] = mapped_column(String(50), unique=True, index=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    hashed_password: Mapped[str] = mapped_column(String(255))
    avatar: Mapped[str | None] = mapped_column(String(500), nullable=True)
    display_name: Mapped[str] = mapped_column(String(100), index=True)
    gender: Mapped[str] = mapped_column(String(50), default="Other")
    created_datetime: Mapped[datetime] = mapped_column(default=utcnow)
    updated_datetime: Mapped[datetime | None] = mapped_column(nullable=True)
    is_activated: Mapped[bool] = mapped_column(default=False)
    # Declared for schema compatibility; no query filters on it.
    is_deleted: Mapped[bool] = mapped_column(default=False)
