from .base import Base
from .user import User
from .category import Category, EntryKind
from .transaction import Transaction
from .budget import Budget

__all__ = [
    "Base",
    "User",
    "Category",
    "EntryKind",
    "Transaction",
    "Budget",
]
