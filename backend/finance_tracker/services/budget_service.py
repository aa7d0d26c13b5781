from datetime import date
from decimal import Decimal
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..exceptions import (
    ConfirmationRequiredError,
    DuplicateBudgetError,
    NotFoundError,
    ValidationError,
)
from ..logger import get_logger
from ..models import Budget, Category, EntryKind
from .ownership import OwnershipGuard

logger = get_logger()


class BudgetService:
    def __init__(self, db: Session, owner_id: str):
        self.db = db
        self.guard = OwnershipGuard(db, owner_id)

    def list_budgets(self) -> list[Budget]:
        """The caller's budgets, latest month first."""
        return (
            self.guard.query(Budget)
            .order_by(Budget.month.desc(), Budget.created_at.desc())
            .all()
        )

    def get_budget(self, budget_id: str) -> Budget:
        return self.guard.get(Budget, budget_id)

    def create_budget(self, category_id: str, amount: Decimal, month: date) -> Budget:
        """
        Set a monthly limit for an expense category.

        Only one budget may exist per category and month.
        """
        try:
            category = self.guard.get(Category, category_id)
        except NotFoundError:
            raise ValidationError("category_id", "Category not found")
        if category.kind != EntryKind.EXPENSE:
            raise ValidationError("category_id", "Budgets can only be set on expense categories")

        month = month.replace(day=1)
        existing = (
            self.guard.query(Budget)
            .filter(Budget.category_id == category.id, Budget.month == month)
            .first()
        )
        if existing:
            raise DuplicateBudgetError()

        budget = Budget(category_id=category.id, month=month)
        budget.amount = amount
        try:
            budget = self.guard.insert(budget)
        except IntegrityError:
            # Lost a race with another session of the same user
            self.db.rollback()
            raise DuplicateBudgetError()

        logger.info(
            "Created budget %s for category %s in %s", budget.id, category.id, month.strftime("%Y-%m")
        )
        return budget

    def delete_budget(self, budget_id: str, confirmed: bool = False) -> None:
        self.get_budget(budget_id)
        if not confirmed:
            raise ConfirmationRequiredError("Are you sure you want to delete this budget?")
        self.guard.delete(Budget, budget_id)
        logger.info("Deleted budget %s", budget_id)
