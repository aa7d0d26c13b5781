import datetime
from decimal import Decimal
from pydantic import BaseModel

from .budget import BudgetResponse
from .category import CategoryResponse
from .transaction import TransactionResponse


class SummaryResponse(BaseModel):
    total_income: Decimal
    total_expenses: Decimal
    balance: Decimal


class CategoryShareItem(BaseModel):
    category: CategoryResponse
    total: Decimal
    percentage: float


class DailyActivityItem(BaseModel):
    date: datetime.date
    label: str
    expenses: Decimal
    income: Decimal


class DailyActivityResponse(BaseModel):
    days: list[DailyActivityItem]
    scale: Decimal


class DashboardResponse(BaseModel):
    summary: SummaryResponse
    top_categories: list[CategoryShareItem]
    daily_activity: DailyActivityResponse
    budgets: list[BudgetResponse]
    recent_transactions: list[TransactionResponse]
