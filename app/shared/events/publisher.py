# 📄 File: app/shared/events/publisher.py
# 🧭 Purpose (Layman Explanation):
# The postal service for events: when something important happens (a user is created),
# it hands the notice to whoever is listening, and never lets a lost letter break the request.
# 🧪 Purpose (Technical Summary):
# Event publisher abstraction with best-effort delivery. Concrete publishers implement
# _dispatch; publish() wraps it so transport failures are logged and never raised into
# the calling workflow. Ships an in-memory publisher (subscribers + captured history)
# and a logging-only publisher.
# 🔗 Dependencies:
# base.py, asyncio, logging, collections
# 🔄 Connected Modules / Calls From:
# app.modules.principal.domain.services (user, group and machine workflows), app.main wiring

import asyncio
import logging
from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Any, Awaitable, Callable, Dict, List, Union

from .base import DomainEvent

logger = logging.getLogger(__name__)

EventCallback = Callable[[DomainEvent], Union[Awaitable[Any], Any]]


class EventPublisher(ABC):
    """
    Base publisher. Subclasses implement ``_dispatch``.
    """

    def __init__(self):
        self.published_count = 0
        self.failed_count = 0

    async def publish(self, event: DomainEvent) -> bool:
        """
        Publish a domain event.

        Args:
            event: Domain event to publish

        Returns:
            True when the event was dispatched, False when dispatch failed.
            Failures are logged, not raised.
        """
        try:
            await self._dispatch(event)
        except Exception as e:
            self.failed_count += 1
            logger.error(
                f"Failed to publish event {event.event_type} ({event.metadata.event_id}): {e}",
                exc_info=True,
            )
            return False

        self.published_count += 1
        logger.debug(f"Published event {event.metadata.event_id} ({event.event_type})")
        return True

    @abstractmethod
    async def _dispatch(self, event: DomainEvent) -> None:
        pass

    def get_publisher_metrics(self) -> Dict[str, Any]:
        return {
            'published_count': self.published_count,
            'failed_count': self.failed_count,
        }


class InMemoryEventPublisher(EventPublisher):
    """
    Keeps every dispatched event and fans it out to in-process subscribers.

    Subscribers register per event type, or for "*" to receive everything.
    Both plain and async callables are accepted.
    """

    def __init__(self):
        super().__init__()
        self.published: List[DomainEvent] = []
        self._subscribers: Dict[str, List[EventCallback]] = defaultdict(list)

    def subscribe(self, event_type: str, callback: EventCallback):
        self._subscribers[event_type].append(callback)

    def unsubscribe(self, event_type: str, callback: EventCallback):
        if callback in self._subscribers.get(event_type, []):
            self._subscribers[event_type].remove(callback)

    def events_of_type(self, event_type: str) -> List[DomainEvent]:
        return [event for event in self.published if event.event_type == event_type]

    async def _dispatch(self, event: DomainEvent) -> None:
        self.published.append(event)
        for callback in self._subscribers.get(event.event_type, []) + self._subscribers.get("*", []):
            result = callback(event)
            if asyncio.iscoroutine(result):
                await result


class LoggingEventPublisher(EventPublisher):
    """Writes each event to the log as JSON. Used when no bus is configured."""

    def __init__(self, logger_name: str = "principal.events"):
        super().__init__()
        self._event_logger = logging.getLogger(logger_name)

    async def _dispatch(self, event: DomainEvent) -> None:
        self._event_logger.info(event.to_json())
