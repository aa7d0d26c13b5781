import enum
from sqlalchemy import String, Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin, OwnedMixin, new_id


class EntryKind(enum.Enum):
    """Whether money leaves or enters. Shared by categories and transactions."""
    EXPENSE = "expense"
    INCOME = "income"


DEFAULT_COLOR = "#6366f1"
DEFAULT_ICON = "DollarSign"


class Category(Base, TimestampMixin, OwnedMixin):
    """
    A named grouping of transactions, tagged expense or income.

    Deleting a category deletes its transactions and budgets.
    """

    __tablename__ = "categories"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    kind: Mapped[EntryKind] = mapped_column(Enum(EntryKind), nullable=False)

    # Display only
    color: Mapped[str] = mapped_column(String(7), nullable=False, default=DEFAULT_COLOR)
    icon: Mapped[str] = mapped_column(String(64), nullable=False, default=DEFAULT_ICON)

    # Relationships
    transactions: Mapped[list["Transaction"]] = relationship(
        "Transaction",
        back_populates="category",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    budgets: Mapped[list["Budget"]] = relationship(
        "Budget",
        back_populates="category",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name='{self.name}', kind={self.kind.value})>"
