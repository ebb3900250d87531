"""Database engine and session management."""

from collections.abc import Generator

from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from taskboard.config import get_settings


def normalize_database_url(database_url: str) -> str:
    """Convert postgresql:// to postgresql+psycopg:// for the psycopg v3 driver."""
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+psycopg://", 1)
    return database_url


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create an engine for the given URL with driver-specific options."""
    url = normalize_database_url(database_url)
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(
        url,
        echo=echo,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


settings = get_settings()
engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)


def get_session() -> Generator[Session, None, None]:
    """Get database session with automatic cleanup."""
    with Session(engine) as session:
        yield session
