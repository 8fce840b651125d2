"""Database engine and schema creation helpers"""

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine

from sidediff.crud import tables  # noqa: F401  registers table metadata


def make_engine(db_url: str) -> Engine:
    """Engine for db_url; SQLite connections may be shared across threads."""
    if db_url.startswith("sqlite"):
        return create_engine(db_url, echo=False, connect_args={"check_same_thread": False})
    return create_engine(db_url, echo=False)


def init_db(engine: Engine) -> None:
    """Create all tables if they do not exist."""
    SQLModel.metadata.create_all(engine)


def reset_db(engine: Engine) -> None:
    """Drop and recreate all tables."""
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
