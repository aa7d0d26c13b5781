import secrets

import bcrypt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..exceptions import AuthenticationError, DuplicateEmailError
from ..logger import get_logger
from ..models import User

logger = get_logger()


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    """Check a password against a stored bcrypt hash. Malformed hashes never match."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


class AuthService:
    def __init__(self, db: Session):
        self.db = db

    def register(self, email: str, password: str) -> User:
        """Create an account and issue its first token."""
        if self.db.query(User).filter(User.email == email).first():
            raise DuplicateEmailError()

        user = User(
            email=email,
            password_hash=hash_password(password),
            api_token=secrets.token_hex(32),
        )
        self.db.add(user)
        try:
            self.db.flush()
        except IntegrityError:
            self.db.rollback()
            raise DuplicateEmailError()
        self.db.refresh(user)
        logger.info("Registered user %s", user.id)
        return user

    def login(self, email: str, password: str) -> User:
        """Check credentials and rotate the user's token."""
        user = self.db.query(User).filter(User.email == email).first()
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Failed login for %s", email)
            raise AuthenticationError("Invalid email or password")

        user.api_token = secrets.token_hex(32)
        self.db.flush()
        logger.info("User %s logged in", user.id)
        return user

    def user_for_token(self, token: str | None) -> User:
        """Resolve a bearer token to its user."""
        if not token:
            raise AuthenticationError()
        user = self.db.query(User).filter(User.api_token == token).first()
        if user is None:
            raise AuthenticationError("Invalid or expired token")
        return user
