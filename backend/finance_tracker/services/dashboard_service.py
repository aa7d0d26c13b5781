from datetime import date
from sqlalchemy.orm import Session

from ..config import Settings
from ..models import Budget, Category, Transaction
from . import aggregation
from .budget_service import BudgetService
from .category_service import CategoryService
from .transaction_service import TransactionService

RECENT_TRANSACTIONS = 10


def budget_response(budget: Budget, transactions: list[Transaction]) -> dict:
    """Budget fields plus its utilization against transactions."""
    usage = aggregation.budget_utilization(budget, transactions)
    return {
        "id": budget.id,
        "category_id": budget.category_id,
        "amount": budget.amount,
        "month": budget.month,
        "created_at": budget.created_at,
        "category": budget.category,
        "spent": usage.spent,
        "percentage": usage.percentage,
        "display_percentage": usage.display_percentage,
        "is_over_budget": usage.is_over_budget,
        "overage": usage.overage,
    }


class DashboardService:
    """Loads the caller's rows once and derives the dashboard views from them."""

    def __init__(self, db: Session, owner_id: str, settings: Settings):
        self.settings = settings
        self.transactions = TransactionService(db, owner_id)
        self.categories = CategoryService(db, owner_id)
        self.budgets = BudgetService(db, owner_id)

    def load(self) -> tuple[list[Transaction], list[Category], list[Budget]]:
        return (
            self.transactions.list_transactions(limit=self.settings.transaction_list_limit),
            self.categories.list_categories(),
            self.budgets.list_budgets(),
        )

    def load_transactions(self) -> list[Transaction]:
        return self.transactions.list_transactions(limit=self.settings.transaction_list_limit)

    def summary(self, transactions: list[Transaction]) -> dict:
        result = aggregation.summarize(transactions)
        return {
            "total_income": result.total_income,
            "total_expenses": result.total_expenses,
            "balance": result.balance,
        }

    def top_categories(
        self,
        transactions: list[Transaction],
        categories: list[Category],
        reference_date: date,
    ) -> list[dict]:
        shares = aggregation.top_expense_categories(
            transactions,
            categories,
            reference_date,
            limit=self.settings.top_categories_limit,
        )
        return [
            {"category": s.category, "total": s.total, "percentage": s.percentage}
            for s in shares
        ]

    def daily_activity(self, transactions: list[Transaction], today: date) -> dict:
        series = aggregation.daily_activity(transactions, today, days=self.settings.activity_days)
        return {
            "days": [
                {"date": d.day, "label": d.label, "expenses": d.expenses, "income": d.income}
                for d in series
            ],
            "scale": aggregation.activity_scale(series, floor=self.settings.activity_scale_floor),
        }

    def dashboard(self, today: date) -> dict:
        transactions, categories, budgets = self.load()
        return {
            "summary": self.summary(transactions),
            "top_categories": self.top_categories(transactions, categories, today),
            "daily_activity": self.daily_activity(transactions, today),
            "budgets": [budget_response(b, transactions) for b in budgets],
            "recent_transactions": transactions[:RECENT_TRANSACTIONS],
        }
