"""Shared database and store fixtures for unit tests"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session

from sidediff.crud.store import CompareStore
from sidediff.crud.tables import CompareItem


@pytest.fixture(name="engine")
def engine_fixture():
    """In-memory SQLite engine shared across sessions, with all tables created."""
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    """Fresh session per test; changes are not committed."""
    with Session(engine) as s:
        yield s


@pytest.fixture(name="store")
def store_fixture(engine):
    return CompareStore(engine)


@pytest.fixture(name="item")
def item_fixture(session):
    """A minimal Original item persisted to the session."""
    i = CompareItem(id=1, panel=1, type="clipboard", data="hello world", length=11, preview="hello world")
    session.add(i)
    session.flush()
    return i
