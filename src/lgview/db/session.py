"""Database session management.

Provides a cached engine and session factory for SQLite access.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from lgview.db.schema import Base

# Default database path, overridable with LGVIEW_DB_PATH
DEFAULT_DB_PATH = Path("data/lgview.db")

DB_PATH_ENV_VAR = "LGVIEW_DB_PATH"

_engine_cache: dict[str, Engine] = {}

_session_factory_cache: dict[str, sessionmaker] = {}


def resolve_db_path(db_path: Path | None = None) -> Path:
    """Resolve the database path.

    An explicit argument wins, then LGVIEW_DB_PATH, then DEFAULT_DB_PATH.

    Args:
        db_path: Optional explicit path.

    Returns:
        Path to the SQLite database file.
    """
    if db_path is not None:
        return Path(db_path)
    env_path = os.environ.get(DB_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)
    return DEFAULT_DB_PATH


def get_engine(db_path: Path | None = None) -> Engine:
    """Get SQLAlchemy engine for the database.

    Engines are cached by resolved db_path. Subsequent calls with the
    same path return the cached engine.

    Args:
        db_path: Path to SQLite database file.

    Returns:
        SQLAlchemy engine instance (cached).
    """
    db_path = resolve_db_path(db_path)
    cache_key = str(db_path.resolve())

    if cache_key in _engine_cache:
        return _engine_cache[cache_key]

    db_path.parent.mkdir(parents=True, exist_ok=True)

    # check_same_thread=False + StaticPool: one shared connection across
    # FastAPI worker threads
    engine = create_engine(
        f"sqlite:///{db_path}",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    _engine_cache[cache_key] = engine

    return engine


def _get_session_factory(db_path: Path | None = None) -> sessionmaker:
    db_path = resolve_db_path(db_path)
    cache_key = str(db_path.resolve())

    if cache_key in _session_factory_cache:
        return _session_factory_cache[cache_key]

    factory = sessionmaker(bind=get_engine(db_path))
    _session_factory_cache[cache_key] = factory

    return factory


def get_session(db_path: Path | None = None) -> Session:
    """Get a database session.

    Note: Caller is responsible for closing the session. For automatic
    resource management, use get_db_session() context manager instead.

    Args:
        db_path: Path to SQLite database file.

    Returns:
        SQLAlchemy Session instance.
    """
    return _get_session_factory(db_path)()


@contextmanager
def get_db_session(db_path: Path | None = None) -> Generator[Session, None, None]:
    """Context manager for database sessions with automatic cleanup.

    Commits on successful exit, rolls back on exception, and always
    closes the session.

    Args:
        db_path: Path to SQLite database file.

    Yields:
        SQLAlchemy Session instance.
    """
    session = get_session(db_path)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(db_path: Path | None = None) -> None:
    """Create all tables if they do not exist.

    Args:
        db_path: Path to SQLite database file.
    """
    Base.metadata.create_all(get_engine(db_path))
