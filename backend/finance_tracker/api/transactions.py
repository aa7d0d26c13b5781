from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..config import Settings
from ..database import get_db
from ..models import User
from ..schemas import TransactionCreate, TransactionResponse
from ..services.transaction_service import TransactionService
from .deps import get_current_user, get_settings

router = APIRouter()


@router.get("/", response_model=list[TransactionResponse])
def list_transactions(
    limit: int | None = Query(None, ge=1),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Get the most recent transactions, newest first."""
    return TransactionService(db, user.id).list_transactions(
        limit=limit or settings.transaction_list_limit
    )


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Get a single transaction by ID."""
    return TransactionService(db, user.id).get_transaction(transaction_id)


@router.post("/", response_model=TransactionResponse, status_code=201)
def create_transaction(
    transaction: TransactionCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Create a new transaction."""
    return TransactionService(db, user.id).create_transaction(**transaction.model_dump())


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(
    transaction_id: str,
    confirm: bool = Query(False),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Delete a transaction."""
    TransactionService(db, user.id).delete_transaction(transaction_id, confirmed=confirm)
    return None
