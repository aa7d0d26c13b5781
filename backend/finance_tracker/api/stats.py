from datetime import date
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..config import Settings
from ..database import get_db
from ..models import User
from ..schemas import (
    SummaryResponse,
    CategoryShareItem,
    DailyActivityResponse,
    DashboardResponse,
)
from ..services.dashboard_service import DashboardService
from .deps import get_current_user, get_settings

router = APIRouter()


@router.get("/summary", response_model=SummaryResponse)
def summary(
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Balance, income and expenses over the loaded transactions."""
    service = DashboardService(db, user.id, settings)
    return service.summary(service.load_transactions())


@router.get("/top-categories", response_model=list[CategoryShareItem])
def top_categories(
    reference_date: date | None = Query(None),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Largest expense categories for the month of reference_date (default today)."""
    service = DashboardService(db, user.id, settings)
    transactions, categories, _ = service.load()
    return service.top_categories(transactions, categories, reference_date or date.today())


@router.get("/daily-activity", response_model=DailyActivityResponse)
def daily_activity(
    today: date | None = Query(None),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Expenses and income per day for the last week."""
    service = DashboardService(db, user.id, settings)
    return service.daily_activity(service.load_transactions(), today or date.today())


@router.get("/dashboard", response_model=DashboardResponse)
def dashboard(
    today: date | None = Query(None),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Everything the overview screen shows, from a single load."""
    return DashboardService(db, user.id, settings).dashboard(today or date.today())
