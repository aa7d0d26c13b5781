from fastapi import APIRouter

from .auth import router as auth_router
from .categories import router as categories_router
from .transactions import router as transactions_router
from .budgets import router as budgets_router
from .stats import router as stats_router

api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(categories_router, prefix="/categories", tags=["categories"])
api_router.include_router(transactions_router, prefix="/transactions", tags=["transactions"])
api_router.include_router(budgets_router, prefix="/budgets", tags=["budgets"])
api_router.include_router(stats_router, prefix="/stats", tags=["stats"])
