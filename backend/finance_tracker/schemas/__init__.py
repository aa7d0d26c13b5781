from .auth import Credentials, RegisterRequest, UserResponse, TokenResponse
from .category import CategoryCreate, CategoryResponse, CategoryDeletePreview
from .transaction import TransactionCreate, TransactionResponse
from .budget import BudgetCreate, BudgetResponse
from .stats import (
    SummaryResponse,
    CategoryShareItem,
    DailyActivityItem,
    DailyActivityResponse,
    DashboardResponse,
)

__all__ = [
    "Credentials",
    "RegisterRequest",
    "UserResponse",
    "TokenResponse",
    "CategoryCreate",
    "CategoryResponse",
    "CategoryDeletePreview",
    "TransactionCreate",
    "TransactionResponse",
    "BudgetCreate",
    "BudgetResponse",
    "SummaryResponse",
    "CategoryShareItem",
    "DailyActivityItem",
    "DailyActivityResponse",
    "DashboardResponse",
]
