"""
Shared test fixtures.

Sets up an isolated test database so tests never touch the
real one. Tables are created before each test and dropped
after it, so no test data persists.
"""

from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from ledger_core.domain.clock import FixedClock
from ledger_core.models import Base
from ledger_core.services.ledger_service import LedgerService


# SQLite keeps the tests free of any database infrastructure.
TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)

TestSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop them after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    """Provide a database session for direct service testing."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def clock():
    """A clock pinned to 15 January 2024."""
    return FixedClock(date(2024, 1, 15))


@pytest.fixture
def service(db_session, clock):
    return LedgerService(db_session, clock=clock)


@pytest.fixture
def session_factory():
    """The test sessionmaker, for code that opens its own sessions."""
    return TestSessionLocal
