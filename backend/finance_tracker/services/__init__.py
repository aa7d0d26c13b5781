from .ownership import OwnershipGuard
from .auth_service import AuthService, hash_password, verify_password
from .category_service import CategoryService
from .transaction_service import TransactionService
from .budget_service import BudgetService
from .dashboard_service import DashboardService, budget_response

__all__ = [
    "OwnershipGuard",
    "AuthService",
    "hash_password",
    "verify_password",
    "CategoryService",
    "TransactionService",
    "BudgetService",
    "DashboardService",
    "budget_response",
]
