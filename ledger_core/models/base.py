"""
Database engine, session management, and base model.

Every model inherits from Base. Every unit of work gets a
session from session_scope().
"""

from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from ledger_core.config import get_settings

settings = get_settings()

# --- Engine ---
# pool_pre_ping=True tests connections before using them,
# which handles a restarted database or a stale connection.
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
)

# --- Session Factory ---
# autocommit=False: the caller decides when an entry becomes
# visible, and all of its amounts become visible together.
# autoflush=False: nothing is sent to the database until an
# explicit flush or commit.
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


class Base(DeclarativeBase):
    pass


@contextmanager
def session_scope(session_factory=SessionLocal):
    """
    Provide a session for one unit of work.

    Commits if the block finishes, rolls back if it raises, and
    always closes the session. An entry posted inside the block
    is therefore stored completely or not at all.
    """
    db = session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
