"""Shared pytest fixtures."""

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from taskboard.api.deps import get_db_session
from taskboard.config import Settings
from taskboard.events.bus import EventBus
from taskboard.main import create_app

from .fakes import RecordingConsumer


@pytest.fixture
def engine():
    """In-memory database shared by every session of a test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Import models to register them
    from taskboard.models.task import Task  # noqa: F401

    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Create a test database session."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def recorder() -> RecordingConsumer:
    return RecordingConsumer()


@pytest.fixture
def event_bus(recorder: RecordingConsumer) -> EventBus:
    return EventBus([recorder])


@pytest.fixture
def app(engine):
    """Application bound to the in-memory database."""
    app = create_app(settings=Settings(), engine=engine)

    def override_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = override_session
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
