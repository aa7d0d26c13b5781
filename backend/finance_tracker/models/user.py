from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin, new_id


class User(Base, TimestampMixin):
    """
    An account that owns categories, transactions and budgets.

    Requests authenticate with the bearer api_token, which is rotated on each login.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    api_token: Mapped[str | None] = mapped_column(String(64), nullable=True, unique=True)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"
