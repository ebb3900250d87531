"""API dependencies for dependency injection."""

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends, Request
from sqlmodel import Session

from taskboard.db.session import get_session
from taskboard.events.bus import EventBus


def get_db_session() -> Generator[Session, None, None]:
    """Get database session dependency."""
    yield from get_session()


DBSession = Annotated[Session, Depends(get_db_session)]


def get_event_bus(request: Request) -> EventBus:
    """Get the event bus owned by the running application."""
    return request.app.state.event_bus


Events = Annotated[EventBus, Depends(get_event_bus)]
