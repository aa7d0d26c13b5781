import re
from datetime import datetime
from pydantic import BaseModel, field_validator

from ..models.category import EntryKind, DEFAULT_COLOR, DEFAULT_ICON

HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")


class CategoryBase(BaseModel):
    """Base category fields."""
    name: str
    kind: EntryKind
    color: str = DEFAULT_COLOR
    icon: str = DEFAULT_ICON


class CategoryCreate(CategoryBase):
    """Fields for creating a category."""

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name cannot be empty")
        return value

    @field_validator("color")
    @classmethod
    def color_is_hex(cls, value: str) -> str:
        if not HEX_COLOR.match(value):
            raise ValueError("Color must be a hex code like #6366f1")
        return value.lower()

    @field_validator("icon")
    @classmethod
    def icon_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Icon cannot be empty")
        return value


class CategoryResponse(CategoryBase):
    """Category response with all fields."""
    id: str
    created_at: datetime

    class Config:
        from_attributes = True


class CategoryDeletePreview(BaseModel):
    """What deleting a category will also remove."""
    category_id: str
    category_name: str
    transaction_count: int
    budget_count: int
    message: str
