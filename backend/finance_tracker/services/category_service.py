from sqlalchemy.orm import Session

from ..exceptions import ConfirmationRequiredError
from ..logger import get_logger
from ..models import Category, EntryKind, Transaction, Budget
from .ownership import OwnershipGuard

logger = get_logger()


class CategoryService:
    def __init__(self, db: Session, owner_id: str):
        self.guard = OwnershipGuard(db, owner_id)

    def list_categories(self, kind: EntryKind | None = None) -> list[Category]:
        """All of the caller's categories, by name."""
        query = self.guard.query(Category)
        if kind is not None:
            query = query.filter(Category.kind == kind)
        return query.order_by(Category.name).all()

    def get_category(self, category_id: str) -> Category:
        return self.guard.get(Category, category_id)

    def create_category(
        self,
        name: str,
        kind: EntryKind,
        color: str,
        icon: str,
    ) -> Category:
        category = self.guard.insert(Category(name=name, kind=kind, color=color, icon=icon))
        logger.info("Created %s category %s '%s'", kind.value, category.id, name)
        return category

    def delete_preview(self, category_id: str) -> dict:
        """Count the rows that deleting this category would remove with it."""
        category = self.get_category(category_id)
        transaction_count = (
            self.guard.query(Transaction)
            .filter(Transaction.category_id == category.id)
            .count()
        )
        budget_count = (
            self.guard.query(Budget)
            .filter(Budget.category_id == category.id)
            .count()
        )
        return {
            "category_id": category.id,
            "category_name": category.name,
            "transaction_count": transaction_count,
            "budget_count": budget_count,
            "message": (
                f"Deleting '{category.name}' will also delete {transaction_count} "
                f"transaction(s) and {budget_count} budget(s) in this category."
            ),
        }

    def delete_category(self, category_id: str, confirmed: bool = False) -> None:
        """Delete a category along with its transactions and budgets."""
        preview = self.delete_preview(category_id)
        if not confirmed:
            raise ConfirmationRequiredError(preview["message"])

        self.guard.delete(Category, category_id)
        logger.info(
            "Deleted category %s with %d transaction(s) and %d budget(s)",
            category_id, preview["transaction_count"], preview["budget_count"],
        )
