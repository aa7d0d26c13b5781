"""
Derived dashboard views over rows already loaded into memory.

Everything here is a pure function of its arguments: no queries, no clock reads
unless the caller omits a reference date. Inputs are any objects exposing the
model attributes (kind, amount, date, category_id, ...), so ORM rows and response
schemas both work. Empty input gives zero totals and empty lists.
"""
import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Any, Iterable, Sequence

from ..models.category import EntryKind

ZERO = Decimal("0.00")


@dataclass
class Summary:
    total_income: Decimal
    total_expenses: Decimal
    balance: Decimal


@dataclass
class CategoryShare:
    category: Any
    total: Decimal
    percentage: float


@dataclass
class DailyActivity:
    day: date
    label: str
    expenses: Decimal
    income: Decimal


@dataclass
class BudgetUtilization:
    budget: Any
    spent: Decimal
    percentage: float
    display_percentage: float
    is_over_budget: bool
    overage: Decimal


def _kind(item: Any) -> EntryKind:
    return EntryKind(item.kind)


def _amount(item: Any) -> Decimal:
    amount = item.amount
    if isinstance(amount, Decimal):
        return amount
    return Decimal(str(amount))


def _sum(transactions: Iterable[Any], kind: EntryKind) -> Decimal:
    return sum((_amount(t) for t in transactions if _kind(t) == kind), ZERO)


def month_bounds(day: date) -> tuple[date, date]:
    """Return the first and last day (inclusive) of day's calendar month."""
    last_day = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last_day)


def in_month(transactions: Iterable[Any], day: date) -> list[Any]:
    """Transactions dated within day's calendar month."""
    start, end = month_bounds(day)
    return [t for t in transactions if start <= t.date <= end]


def total_income(transactions: Iterable[Any]) -> Decimal:
    return _sum(transactions, EntryKind.INCOME)


def total_expenses(transactions: Iterable[Any]) -> Decimal:
    return _sum(transactions, EntryKind.EXPENSE)


def balance(transactions: Iterable[Any]) -> Decimal:
    """Income minus expenses. May be negative."""
    transactions = list(transactions)
    return total_income(transactions) - total_expenses(transactions)


def summarize(transactions: Iterable[Any]) -> Summary:
    transactions = list(transactions)
    income = total_income(transactions)
    expenses = total_expenses(transactions)
    return Summary(total_income=income, total_expenses=expenses, balance=income - expenses)


def _percentage(part: Decimal, whole: Decimal) -> float:
    if whole == 0:
        return 0.0
    return float(part / whole * 100)


def category_month_totals(
    transactions: Iterable[Any],
    categories: Iterable[Any],
    reference_date: date,
) -> list[tuple[Any, Decimal]]:
    """Month-to-date expense sum for every expense category, in category order."""
    month_expenses = [
        t for t in in_month(transactions, reference_date) if _kind(t) == EntryKind.EXPENSE
    ]
    by_category: dict[Any, Decimal] = {}
    for t in month_expenses:
        by_category[t.category_id] = by_category.get(t.category_id, ZERO) + _amount(t)

    return [
        (category, by_category.get(category.id, ZERO))
        for category in categories
        if _kind(category) == EntryKind.EXPENSE
    ]


def top_expense_categories(
    transactions: Sequence[Any],
    categories: Iterable[Any],
    reference_date: date,
    limit: int = 5,
) -> list[CategoryShare]:
    """
    The biggest expense categories of reference_date's month.

    Only categories that spent something are kept, largest first, at most limit of
    them. Percentages are of all expenses in the month, including any whose
    category is not in categories.
    """
    month_total = total_expenses(in_month(transactions, reference_date))
    totals = [
        (category, total)
        for category, total in category_month_totals(transactions, categories, reference_date)
        if total > 0
    ]
    # sorted() is stable, so ties keep category order
    totals = sorted(totals, key=lambda item: item[1], reverse=True)[:limit]

    return [
        CategoryShare(
            category=category,
            total=total,
            percentage=_percentage(total, month_total),
        )
        for category, total in totals
    ]


def daily_activity(
    transactions: Iterable[Any],
    today: date | None = None,
    days: int = 7,
) -> list[DailyActivity]:
    """Expense and income totals per day for the days ending today, oldest first."""
    today = today or date.today()
    transactions = list(transactions)
    series = []
    for offset in range(days - 1, -1, -1):
        day = today - timedelta(days=offset)
        day_transactions = [t for t in transactions if t.date == day]
        series.append(DailyActivity(
            day=day,
            label=calendar.day_abbr[day.weekday()],
            expenses=total_expenses(day_transactions),
            income=total_income(day_transactions),
        ))
    return series


def activity_scale(series: Iterable[DailyActivity], floor: int = 100) -> Decimal:
    """Largest single-day value in the series, used to scale bars. Never below floor."""
    values = [Decimal(floor)]
    for entry in series:
        values.append(entry.expenses)
        values.append(entry.income)
    return max(values)


def budget_spent(budget: Any, transactions: Iterable[Any]) -> Decimal:
    """Expenses in the budget's category during the budget's month."""
    return sum(
        (
            _amount(t)
            for t in in_month(transactions, budget.month)
            if t.category_id == budget.category_id and _kind(t) == EntryKind.EXPENSE
        ),
        ZERO,
    )


def budget_utilization(budget: Any, transactions: Iterable[Any]) -> BudgetUtilization:
    """How much of a budget has been spent, and by how much it is exceeded."""
    spent = budget_spent(budget, transactions)
    limit = _amount(budget)
    percentage = _percentage(spent, limit)
    is_over_budget = spent > limit
    return BudgetUtilization(
        budget=budget,
        spent=spent,
        percentage=percentage,
        display_percentage=min(percentage, 100.0),
        is_over_budget=is_over_budget,
        overage=spent - limit if is_over_budget else ZERO,
    )
