from datetime import date
from decimal import Decimal
from sqlalchemy.orm import Session

from ..exceptions import ConfirmationRequiredError, NotFoundError, ValidationError
from ..logger import get_logger
from ..models import Category, EntryKind, Transaction
from .ownership import OwnershipGuard

logger = get_logger()

DEFAULT_LIMIT = 100


class TransactionService:
    def __init__(self, db: Session, owner_id: str):
        self.guard = OwnershipGuard(db, owner_id)

    def list_transactions(self, limit: int = DEFAULT_LIMIT) -> list[Transaction]:
        """The caller's most recent transactions, newest first."""
        return (
            self.guard.query(Transaction)
            .order_by(Transaction.date.desc(), Transaction.created_at.desc())
            .limit(limit)
            .all()
        )

    def get_transaction(self, transaction_id: str) -> Transaction:
        return self.guard.get(Transaction, transaction_id)

    def create_transaction(
        self,
        category_id: str,
        amount: Decimal,
        description: str,
        date: date,
        kind: EntryKind,
    ) -> Transaction:
        """
        Record a transaction.

        The category must belong to the caller and have the same kind as the
        transaction.
        """
        try:
            category = self.guard.get(Category, category_id)
        except NotFoundError:
            raise ValidationError("category_id", "Category not found")
        if category.kind != kind:
            raise ValidationError(
                "kind",
                f"Category '{category.name}' is an {category.kind.value} category",
            )

        transaction = Transaction(
            category_id=category.id,
            description=description,
            date=date,
            kind=kind,
        )
        transaction.amount = amount
        transaction = self.guard.insert(transaction)
        logger.info(
            "Created %s transaction %s for %s", kind.value, transaction.id, transaction.amount
        )
        return transaction

    def delete_transaction(self, transaction_id: str, confirmed: bool = False) -> None:
        self.get_transaction(transaction_id)
        if not confirmed:
            raise ConfirmationRequiredError("Are you sure you want to delete this transaction?")
        self.guard.delete(Transaction, transaction_id)
        logger.info("Deleted transaction %s", transaction_id)
