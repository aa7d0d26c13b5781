"""
Owner-scoped access to the database.

Every read and write of an owned row goes through OwnershipGuard: inserts get the
caller's id injected (and are rejected if they claim another owner), queries are
filtered to the caller's rows, and get/update/delete of another user's row raise
AccessDeniedError.
"""
from typing import Any, TypeVar
from sqlalchemy.orm import Query, Session

from ..exceptions import AccessDeniedError, NotFoundError
from ..logger import get_logger
from ..models.base import OwnedMixin

logger = get_logger()

M = TypeVar("M", bound=OwnedMixin)


class OwnershipGuard:
    def __init__(self, db: Session, owner_id: str):
        self.db = db
        self.owner_id = owner_id

    def _check(self, owner_id: str | None, action: str, entity: str) -> None:
        if owner_id != self.owner_id:
            logger.warning("Rejected %s of %s by user %s", action, entity, self.owner_id)
            raise AccessDeniedError()

    def query(self, model: type[M]) -> Query:
        """Query rows of model owned by the caller."""
        return self.db.query(model).filter(model.owner_id == self.owner_id)

    def get(self, model: type[M], row_id: str) -> M:
        """Fetch one row by id. Raises NotFoundError or AccessDeniedError."""
        row = self.db.get(model, row_id)
        if row is None:
            raise NotFoundError(model.__name__)
        self._check(row.owner_id, "read", model.__name__)
        return row

    def insert(self, row: M) -> M:
        """Insert row on behalf of the caller, injecting the owner if unset."""
        if row.owner_id is None:
            row.owner_id = self.owner_id
        self._check(row.owner_id, "insert", type(row).__name__)
        self.db.add(row)
        self.db.flush()
        self.db.refresh(row)
        return row

    def update(self, model: type[M], row_id: str, **values: Any) -> M:
        """Update fields on a row the caller owns. The owner can't be changed."""
        row = self.get(model, row_id)
        self._check(values.get("owner_id", self.owner_id), "update", model.__name__)
        for field, value in values.items():
            setattr(row, field, value)
        self.db.flush()
        return row

    def delete(self, model: type[M], row_id: str) -> None:
        """Delete a row the caller owns."""
        row = self.get(model, row_id)
        self.db.delete(row)
        self.db.flush()
