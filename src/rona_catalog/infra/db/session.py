from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from rona_catalog.infra.db.config import (
    database_max_overflow,
    database_pool_size,
    database_url,
)

# Created on first use so importing the app never needs a database
_engine: Engine | None = None
_session_local: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """
    Get or create the database engine.

    Pool size and overflow come from DATABASE_POOL_SIZE and
    DATABASE_MAX_OVERFLOW; connections are pinged before checkout and
    recycled hourly.
    """
    global _engine
    if _engine is None:
        _engine = create_engine(
            database_url(),
            pool_size=database_pool_size(),
            max_overflow=database_max_overflow(),
            pool_pre_ping=True,
            pool_recycle=3600,
        )
    return _engine


def get_session_local() -> sessionmaker[Session]:
    """Get or create the session factory."""
    global _session_local
    if _session_local is None:
        _session_local = sessionmaker(
            bind=get_engine(),
            class_=Session,
            expire_on_commit=False,
        )
    return _session_local


@contextmanager
def get_session() -> Iterator[Session]:
    """Read-mostly catalog session; commits on success, rolls back on error."""
    session = get_session_local()()

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
