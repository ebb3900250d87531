"""Publish/subscribe bus for task lifecycle events.

Each application owns its own ``EventBus`` instance (see ``app.state``), so
separate apps or tests never share subscribers.
"""

import logging

from taskboard.config import Settings
from taskboard.events.consumers import EventConsumer, LoggingConsumer, NotificationFeed
from taskboard.events.types import TaskEventData

logger = logging.getLogger(__name__)


class EventBus:
    """Routes published events to the consumers subscribed to this instance."""

    def __init__(self, consumers: list[EventConsumer] | None = None) -> None:
        self._consumers: list[EventConsumer] = list(consumers or [])

    @property
    def consumers(self) -> list[EventConsumer]:
        return list(self._consumers)

    def subscribe(self, consumer: EventConsumer) -> None:
        """Register a consumer. Subscribing the same consumer twice is a no-op."""
        if consumer not in self._consumers:
            self._consumers.append(consumer)

    def unsubscribe(self, consumer: EventConsumer) -> None:
        if consumer in self._consumers:
            self._consumers.remove(consumer)

    def publish(self, event: TaskEventData) -> None:
        """Deliver an event to every interested consumer.

        Errors in one consumer do not affect other consumers or the caller.
        """
        for consumer in list(self._consumers):
            if not consumer.handles(event.event_type):
                continue

            try:
                consumer.process(event)
            except Exception as e:
                logger.error(
                    "Consumer processing failed",
                    extra={
                        "consumer": consumer.__class__.__name__,
                        "event_id": str(event.event_id),
                        "event_type": event.event_type.value,
                        "error": str(e),
                    },
                    exc_info=True,
                )


def build_event_bus(settings: Settings) -> EventBus:
    """Create a bus wired with the built-in consumers."""
    return EventBus(
        [
            LoggingConsumer(),
            NotificationFeed(limit=settings.NOTIFICATION_LIMIT),
        ]
    )
