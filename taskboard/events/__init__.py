"""Task lifecycle events.

Components:
- types.py: Event type definitions and payload schema
- consumers.py: In-process event handlers (logging, notification feed)
- bus.py: Per-application publish/subscribe bus
"""

from taskboard.events.types import EventType, TaskEventData
from taskboard.events.consumers import (
    EventConsumer,
    LoggingConsumer,
    Notification,
    NotificationFeed,
)
from taskboard.events.bus import EventBus, build_event_bus

__all__ = [
    # Types
    "EventType",
    "TaskEventData",
    # Consumers
    "EventConsumer",
    "LoggingConsumer",
    "Notification",
    "NotificationFeed",
    # Bus
    "EventBus",
    "build_event_bus",
]
