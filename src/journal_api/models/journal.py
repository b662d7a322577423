"""Journal ORM model."""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import uuid4

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from journal_api.database import Base
from journal_api.utils.dates import utcnow


def new_object_id() -> str:
    """Generate an opaque identifier for journals and comments."""
    return uuid4().hex


class Journal(Base):
    """A journal entry with its likes and embedded comment thread."""

    __tablename__ = "journals"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_object_id)
    title: Mapped[str] = mapped_column(Text)
    content: Mapped[str] = mapped_column(Text)
    username: Mapped[str] = mapped_column(String(50), index=True)  # author, not a foreign key
    user_avatar: Mapped[str | None] = mapped_column(String(500), nullable=True)
    likes: Mapped[list[str]] = mapped_column(JSON, default=list)
    comments: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)
    created_datetime: Mapped[datetime] = mapped_column(default=utcnow, index=True)
    updated_datetime: Mapped[datetime] = mapped_column(default=utcnow, index=True)
    is_deleted: Mapped[bool] = mapped_column(default=False)
