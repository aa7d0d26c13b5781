from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..models import User
from ..schemas import Credentials, RegisterRequest, TokenResponse, UserResponse
from ..services.auth_service import AuthService
from .deps import get_current_user

router = APIRouter()


@router.post("/register", response_model=TokenResponse, status_code=201)
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    """Create an account."""
    user = AuthService(db).register(data.email, data.password)
    return {"user": user, "token": user.api_token}


@router.post("/login", response_model=TokenResponse)
def login(data: Credentials, db: Session = Depends(get_db)):
    """Log in and get a new token. Previous tokens stop working."""
    user = AuthService(db).login(data.email, data.password)
    return {"user": user, "token": user.api_token}


@router.get("/me", response_model=UserResponse)
def me(user: User = Depends(get_current_user)):
    """Get the logged-in user."""
    return user
