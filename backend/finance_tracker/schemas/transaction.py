import datetime
from decimal import Decimal
from pydantic import BaseModel, Field, field_validator

from ..models.category import EntryKind
from .category import CategoryResponse


class TransactionBase(BaseModel):
    """Base transaction fields."""
    category_id: str
    amount: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    description: str
    date: datetime.date
    kind: EntryKind


class TransactionCreate(TransactionBase):
    """Fields for creating a transaction."""

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Description cannot be empty")
        return value


class TransactionResponse(TransactionBase):
    """Transaction response with all fields."""
    id: str
    created_at: datetime.datetime
    category: CategoryResponse | None = None

    class Config:
        from_attributes = True
