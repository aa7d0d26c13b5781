from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from ..config import Settings
from ..database import get_db
from ..models import User
from ..services.auth_service import AuthService


def get_settings(request: Request) -> Settings:
    """FastAPI dependency for the application settings."""
    return request.app.state.settings


def get_current_user(
    authorization: str | None = Header(None),
    db: Session = Depends(get_db),
) -> User:
    """Resolve 'Authorization: Bearer <token>' to the calling user."""
    token = None
    if authorization:
        scheme, _, value = authorization.partition(" ")
        if scheme.lower() == "bearer":
            token = value.strip()
    return AuthService(db).user_for_token(token)
