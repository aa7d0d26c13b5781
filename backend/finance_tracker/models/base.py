import uuid
from datetime import datetime
from sqlalchemy import DateTime, ForeignKey, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base for all models."""
    pass


def new_id() -> str:
    """Generate a primary key value."""
    return str(uuid.uuid4())


class TimestampMixin:
    """Adds a created_at column populated by the database."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )


class OwnedMixin:
    """Adds the owning user's id. Every owned row belongs to exactly one user."""

    owner_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
