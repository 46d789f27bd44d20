from typing import Generator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from quizapp.database.session import SQLALCHEMY_DATABASE_URL, get_local_session
from quizapp.log import get_logger

log = get_logger(__name__)


ENGINE = create_engine(
    SQLALCHEMY_DATABASE_URL,
    pool_size=5,          # max number of persistent connections in the pool
    max_overflow=0,       # 0 means never open more than pool_size
    pool_timeout=30,      # seconds to wait for a connection before raising
    pool_recycle=1800,    # recycle connections periodically (helps stale conns)
    pool_pre_ping=True,   # validates connections before using
    future=True,
)
SessionLocal = sessionmaker(
    bind=ENGINE,
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
    future=True,
)


def get_db() -> Generator:  # pragma: no cover
    """
    Returns a generator that yields a database session

    Yields:
        Session: A database session object.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_ctx_db(engine: Engine) -> Generator:
    """
    Context manager that creates a database session and yields
    it for use in a 'with' statement.

    Uncommitted work is rolled back and the error re-raised if the
    block fails.

    Parameters:
        engine (Engine): The engine to open the session on.

    Yields:
        Generator: A database session.
    """
    db = get_local_session(engine)()
    try:
        yield db
    except Exception as e:
        log.error("An error occurred while using the database session. Error: %s", e)
        db.rollback()
        raise
    finally:
        db.close()
