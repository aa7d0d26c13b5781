import re
from datetime import datetime, date
from decimal import Decimal
from pydantic import BaseModel, Field, field_validator

from .category import CategoryResponse

YEAR_MONTH = re.compile(r"^\d{4}-\d{2}$")


# --- Input schemas ---

class BudgetCreate(BaseModel):
    category_id: str
    amount: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    month: date

    @field_validator("month", mode="before")
    @classmethod
    def accept_year_month(cls, value):
        # The month picker sends "2024-01"
        if isinstance(value, str) and YEAR_MONTH.match(value):
            return f"{value}-01"
        return value

    @field_validator("month")
    @classmethod
    def first_of_month(cls, value: date) -> date:
        return value.replace(day=1)


# --- Response schemas ---

class BudgetResponse(BaseModel):
    id: str
    category_id: str
    amount: Decimal
    month: date
    created_at: datetime
    category: CategoryResponse | None = None

    # Utilization against the loaded transactions
    spent: Decimal
    percentage: float
    display_percentage: float
    is_over_budget: bool
    overage: Decimal
