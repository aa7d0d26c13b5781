import datetime
from decimal import Decimal
from sqlalchemy import String, Integer, Date, ForeignKey, Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin, OwnedMixin, new_id
from .category import EntryKind


def to_cents(value: Decimal) -> int:
    """Convert a two-decimal amount to integer cents."""
    return int((Decimal(value) * 100).to_integral_value())


def from_cents(cents: int) -> Decimal:
    """Convert integer cents back to a two-decimal amount."""
    return (Decimal(cents) / 100).quantize(Decimal("0.01"))


class Transaction(Base, TimestampMixin, OwnedMixin):
    """
    A single income or expense entry.

    Amounts are stored as positive integer cents; the direction comes from kind,
    which must match the category's kind.
    """

    __tablename__ = "transactions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    category_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    amount_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    description: Mapped[str] = mapped_column(String(500), nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    kind: Mapped[EntryKind] = mapped_column(Enum(EntryKind), nullable=False)

    # Relationships
    category: Mapped["Category"] = relationship("Category", back_populates="transactions")

    @property
    def amount(self) -> Decimal:
        """Get amount as a decimal."""
        return from_cents(self.amount_cents)

    @amount.setter
    def amount(self, value: Decimal) -> None:
        """Set amount from a decimal."""
        self.amount_cents = to_cents(value)

    def __repr__(self) -> str:
        return (
            f"<Transaction(id={self.id}, date={self.date}, "
            f"amount=${self.amount:.2f}, kind={self.kind.value})>"
        )
