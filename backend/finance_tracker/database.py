from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from .logger import get_logger
from .models import Base

logger = get_logger()

# Global state for the open database
_current_engine: Engine | None = None
_current_session_factory: sessionmaker | None = None


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    """Enable foreign keys for SQLite so deletes cascade."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def init_database(db_url: str) -> Engine:
    """
    Open the database at db_url.

    Creates the tables if they don't exist. An in-memory URL shares a single
    connection so every session sees the same data.
    """
    global _current_engine, _current_session_factory

    if _current_engine is not None:
        close_database()

    connect_args = {"check_same_thread": False}
    if db_url in ("sqlite://", "sqlite:///:memory:"):
        _current_engine = create_engine(
            db_url, echo=False, connect_args=connect_args, poolclass=StaticPool
        )
    else:
        _current_engine = create_engine(db_url, echo=False, connect_args=connect_args)
    _current_session_factory = sessionmaker(bind=_current_engine)

    Base.metadata.create_all(_current_engine)
    logger.info("Opened database %s", _current_engine.url)
    return _current_engine


def close_database() -> None:
    """Close the current database."""
    global _current_engine, _current_session_factory

    if _current_engine is not None:
        _current_engine.dispose()
        _current_engine = None
        _current_session_factory = None


def get_session() -> Session:
    """Get a database session."""
    if _current_session_factory is None:
        raise RuntimeError("No database is currently open")
    return _current_session_factory()


def get_db():
    """FastAPI dependency for database sessions."""
    session = get_session()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def is_database_open() -> bool:
    """Check if a database is currently open."""
    return _current_engine is not None
