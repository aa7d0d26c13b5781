"""Shared pytest fixtures for all tests."""

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from finance_tracker import database
from finance_tracker.config import Settings
from finance_tracker.main import create_app
from finance_tracker.models import Category, EntryKind, Transaction, Budget
from finance_tracker.services.auth_service import AuthService


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at a temporary data directory.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.
    """
    return Settings(data_dir=tmp_path / "finance", log_level="DEBUG", log_to_file=False)


@pytest.fixture
def engine():
    """Open a fresh in-memory database with the schema created."""
    engine = database.init_database("sqlite://")
    yield engine
    database.close_database()


@pytest.fixture
def db(engine):
    """A session on the in-memory database."""
    session = database.get_session()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def alice(db):
    user = AuthService(db).register("alice@example.com", "correct horse")
    db.commit()
    return user


@pytest.fixture
def bob(db):
    user = AuthService(db).register("bob@example.com", "battery staple")
    db.commit()
    return user


def make_category(db, owner, name="Food", kind=EntryKind.EXPENSE):
    category = Category(owner_id=owner.id, name=name, kind=kind)
    db.add(category)
    db.flush()
    return category


def make_transaction(db, owner, category, amount, day, kind=None, description="Test"):
    transaction = Transaction(
        owner_id=owner.id,
        category_id=category.id,
        description=description,
        date=day,
        kind=kind or category.kind,
    )
    transaction.amount = Decimal(amount)
    db.add(transaction)
    db.flush()
    return transaction


def make_budget(db, owner, category, amount, month):
    budget = Budget(owner_id=owner.id, category_id=category.id, month=month)
    budget.amount = Decimal(amount)
    db.add(budget)
    db.flush()
    return budget


@pytest.fixture
def factory(db):
    """Helpers for inserting rows directly, bypassing the services."""

    class Factory:
        category = staticmethod(lambda *a, **kw: make_category(db, *a, **kw))
        transaction = staticmethod(lambda *a, **kw: make_transaction(db, *a, **kw))
        budget = staticmethod(lambda *a, **kw: make_budget(db, *a, **kw))

    return Factory


@pytest.fixture
def client(engine, test_settings):
    """A TestClient for the app, sharing the in-memory database."""
    app = create_app(test_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def auth_headers(client):
    """Register a user through the API and return its Authorization header."""

    def _register(email="carol@example.com", password="s3cret-pass"):
        response = client.post("/api/auth/register", json={"email": email, "password": password})
        assert response.status_code == 201
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _register


JAN_5 = date(2024, 1, 5)
JAN_10 = date(2024, 1, 10)
