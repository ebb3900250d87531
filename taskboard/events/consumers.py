"""In-process consumers for task lifecycle events.

Event Flow:
    API → Services → EventBus → Consumers
                                   ↓
                     [LoggingConsumer, NotificationFeed]
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass, field
from uuid import UUID, uuid4

from taskboard.events.types import EventType, TaskEventData

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Consumer Base Class
# -----------------------------------------------------------------------------


class EventConsumer(ABC):
    """Abstract base class for event consumers.

    Each consumer handles specific event types and performs a side effect
    (logging, user notifications, ...).
    """

    @abstractmethod
    def handles(self, event_type: EventType) -> bool:
        """Check if this consumer handles the given event type."""
        pass

    @abstractmethod
    def process(self, event: TaskEventData) -> None:
        """Process an event.

        Args:
            event: The published event

        Note:
            Exceptions raised here are logged by the bus and do not reach
            the publisher or the other consumers.
        """
        pass


# -----------------------------------------------------------------------------
# Logging Consumer - Records all task lifecycle events
# -----------------------------------------------------------------------------


class LoggingConsumer(EventConsumer):
    """Consumer that writes every lifecycle event to the application log."""

    def handles(self, event_type: EventType) -> bool:
        return True

    def process(self, event: TaskEventData) -> None:
        logger.info("Task event", extra=event.to_log_dict())


# -----------------------------------------------------------------------------
# Notification Feed - User-facing messages for lifecycle events
# -----------------------------------------------------------------------------


@dataclass
class Notification:
    """A short user-facing message describing what just happened."""

    title: str
    description: str
    event_type: EventType
    task_id: int
    id: UUID = field(default_factory=uuid4)


class NotificationFeed(EventConsumer):
    """Bounded feed of notifications derived from lifecycle events.

    Only the newest ``limit`` notifications are kept; older ones are dropped
    as new ones arrive.
    """

    MESSAGES: dict[EventType, tuple[str, str]] = {
        EventType.TASK_CREATED: ("Success", "Task added successfully!"),
        EventType.TASK_COMPLETED: ("Task completed!", "Great job! 🎉"),
        EventType.TASK_REOPENED: ("Task marked as pending", "Task moved back to pending"),
        EventType.TASK_DELETED: ("Task deleted", "The task has been removed successfully."),
    }

    def __init__(self, limit: int = 1) -> None:
        if limit < 1:
            raise ValueError("Notification limit must be at least 1")
        self.limit = limit
        self._items: deque[Notification] = deque(maxlen=limit)

    def handles(self, event_type: EventType) -> bool:
        return event_type in self.MESSAGES

    def process(self, event: TaskEventData) -> None:
        title, description = self.MESSAGES[event.event_type]
        # Newest first, matching how the client stacks them
        self._items.appendleft(
            Notification(
                title=title,
                description=description,
                event_type=event.event_type,
                task_id=event.task_id,
            )
        )

    def notifications(self) -> list[Notification]:
        """Current notifications, newest first."""
        return list(self._items)

    def dismiss(self, notification_id: UUID) -> bool:
        """Remove one notification. Returns False if it was already gone."""
        for item in self._items:
            if item.id == notification_id:
                self._items.remove(item)
                return True
        return False

    def clear(self) -> None:
        self._items.clear()
