from datetime import date
from decimal import Decimal
from sqlalchemy import String, Integer, Date, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin, OwnedMixin, new_id
from .transaction import to_cents, from_cents


class Budget(Base, TimestampMixin, OwnedMixin):
    """A monthly spending ceiling for one expense category."""

    __tablename__ = "budgets"
    __table_args__ = (
        UniqueConstraint("owner_id", "category_id", "month", name="uq_budget_owner_category_month"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    category_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    amount_cents: Mapped[int] = mapped_column(Integer, nullable=False)
    # Always the first day of the month
    month: Mapped[date] = mapped_column(Date, nullable=False, index=True)

    # Relationships
    category: Mapped["Category"] = relationship("Category", back_populates="budgets")

    @property
    def amount(self) -> Decimal:
        return from_cents(self.amount_cents)

    @amount.setter
    def amount(self, value: Decimal) -> None:
        self.amount_cents = to_cents(value)

    def __repr__(self) -> str:
        return (
            f"<Budget(category={self.category_id}, month={self.month:%Y-%m}, "
            f"amount=${self.amount:.2f})>"
        )
