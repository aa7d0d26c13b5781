from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..config import Settings
from ..database import get_db
from ..models import User
from ..schemas import BudgetCreate, BudgetResponse
from ..services.budget_service import BudgetService
from ..services.dashboard_service import budget_response
from ..services.transaction_service import TransactionService
from .deps import get_current_user, get_settings

router = APIRouter()


def _loaded_transactions(db: Session, user: User, settings: Settings):
    return TransactionService(db, user.id).list_transactions(
        limit=settings.transaction_list_limit
    )


@router.get("/", response_model=list[BudgetResponse])
def list_budgets(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Get all budgets, latest month first, with how much of each is spent."""
    budgets = BudgetService(db, user.id).list_budgets()
    transactions = _loaded_transactions(db, user, settings)
    return [budget_response(b, transactions) for b in budgets]


@router.get("/{budget_id}", response_model=BudgetResponse)
def get_budget(
    budget_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    budget = BudgetService(db, user.id).get_budget(budget_id)
    return budget_response(budget, _loaded_transactions(db, user, settings))


@router.post("/", response_model=BudgetResponse, status_code=201)
def create_budget(
    data: BudgetCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    budget = BudgetService(db, user.id).create_budget(
        category_id=data.category_id,
        amount=data.amount,
        month=data.month,
    )
    return budget_response(budget, _loaded_transactions(db, user, settings))


@router.delete("/{budget_id}", status_code=204)
def delete_budget(
    budget_id: str,
    confirm: bool = Query(False),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    BudgetService(db, user.id).delete_budget(budget_id, confirmed=confirm)
