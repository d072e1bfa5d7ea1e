# 📄 File: app/shared/events/base.py

# 🧭 Purpose (Layman Explanation):
# Defines what an "event" looks like: a short notice that something important happened
# (a user was created, a group was deleted) plus when, where and for whom it happened.

# 🧪 Purpose (Technical Summary):
# Base event classes for domain events, providing structure for event data and
# metadata, JSON serialization, and a per-subclass validation hook.

# 🔗 Dependencies:
# - uuid: Event unique identifiers
# - datetime: Event timestamps
# - dataclasses: Event metadata structure
# - typing: Type annotations

# 🔄 Connected Modules / Calls From:
# Used by: app.modules.principal.domain.events (concrete events),
# app.shared.events.publisher (distribution)

import json
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4


@dataclass
class EventMetadata:
    """
    Metadata for domain events.

    Contains common information about event routing and tracking.
    """
    event_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = "1.0"
    source: str = "principal-service"
    correlation_id: Optional[str] = None
    tenant_id: Optional[str] = None
    user_id: Optional[str] = None
    category: str = "general"
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert metadata to dictionary."""
        data = asdict(self)
        data['timestamp'] = self.timestamp.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EventMetadata':
        """Create metadata from dictionary."""
        data = dict(data)
        if 'timestamp' in data and isinstance(data['timestamp'], str):
            data['timestamp'] = datetime.fromisoformat(data['timestamp'])
        return cls(**data)


class DomainEvent:
    """
    Base class for all domain events.

    Subclasses set a stable ``event_type`` and may override
    ``_validate_event_data`` to enforce required payload keys.
    """

    def __init__(
        self,
        event_type: str,
        data: Dict[str, Any],
        metadata: Optional[EventMetadata] = None,
        **kwargs
    ):
        """
        Initialize domain event.

        Args:
            event_type: Type identifier for the event
            data: Event payload data
            metadata: Event metadata
            **kwargs: Additional metadata fields
        """
        self.event_type = event_type
        self.data = data or {}

        if metadata is None:
            metadata = EventMetadata()

        for key, value in kwargs.items():
            if hasattr(metadata, key):
                setattr(metadata, key, value)

        self.metadata = metadata
        self._validate()

    def _validate(self):
        """Validate event structure and data."""
        if not self.event_type:
            raise ValueError("Event type is required")

        if not isinstance(self.data, dict):
            raise ValueError("Event data must be a dictionary")

        self._validate_event_data()

    def _validate_event_data(self):
        """Validate event-specific data. Override in subclasses."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary representation."""
        return {
            'event_type': self.event_type,
            'data': self.data,
            'metadata': self.metadata.to_dict()
        }

    def to_json(self) -> str:
        """Convert event to JSON string."""
        return json.dumps(self.to_dict(), default=str, ensure_ascii=False)

    def __str__(self) -> str:
        return f"{self.event_type}({self.metadata.event_id})"

    def __repr__(self) -> str:
        return f"DomainEvent(type='{self.event_type}', id='{self.metadata.event_id}')"
