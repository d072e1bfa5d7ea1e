# 📄 File: app/shared/events/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The notice board of the service: when something important happens, an event describing
# it is handed to a publisher.
#
# 🧪 Purpose (Technical Summary):
# Domain events package: DomainEvent/EventMetadata and the best-effort publishers.
#
# 🔗 Dependencies:
# - base.py, publisher.py
#
# 🔄 Connected Modules / Calls From:
# - principal domain events and services, presentation wiring

from .base import DomainEvent, EventMetadata
from .publisher import EventPublisher, InMemoryEventPublisher, LoggingEventPublisher

__all__ = [
    "DomainEvent",
    "EventMetadata",
    "EventPublisher",
    "InMemoryEventPublisher",
    "LoggingEventPublisher",
]
