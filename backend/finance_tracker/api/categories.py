from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..models import EntryKind, User
from ..schemas import CategoryCreate, CategoryResponse, CategoryDeletePreview
from ..services.category_service import CategoryService
from .deps import get_current_user

router = APIRouter()


@router.get("/", response_model=list[CategoryResponse])
def list_categories(
    kind: EntryKind | None = Query(None),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Get all categories, by name."""
    return CategoryService(db, user.id).list_categories(kind=kind)


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(
    category_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Get a single category by ID."""
    return CategoryService(db, user.id).get_category(category_id)


@router.post("/", response_model=CategoryResponse, status_code=201)
def create_category(
    category: CategoryCreate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Create a new category."""
    return CategoryService(db, user.id).create_category(**category.model_dump())


@router.get("/{category_id}/delete-preview", response_model=CategoryDeletePreview)
def delete_preview(
    category_id: str,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """How many transactions and budgets deleting this category will remove."""
    return CategoryService(db, user.id).delete_preview(category_id)


@router.delete("/{category_id}", status_code=204)
def delete_category(
    category_id: str,
    confirm: bool = Query(False),
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Delete a category and all of its transactions and budgets."""
    CategoryService(db, user.id).delete_category(category_id, confirmed=confirm)
    return None
