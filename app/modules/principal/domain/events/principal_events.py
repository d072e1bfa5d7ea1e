# 📄 File: app/modules/principal/domain/events/principal_events.py
# 🧭 Purpose (Layman Explanation):
# The notices the Principal Service sends out when users, groups or machines are created,
# looked up or removed, so other services can react.
# 🧪 Purpose (Technical Summary):
# Concrete DomainEvent types for the principal aggregates. Each carries the aggregate id
# and tenant in its payload and routes under the "principal" category.
# 🔗 Dependencies:
# app.shared.events.base
# 🔄 Connected Modules / Calls From:
# user_service.py, group_service.py, machine_service.py

from typing import Any, Dict, Optional
from uuid import UUID

from app.shared.events.base import DomainEvent


class PrincipalEvent(DomainEvent):
    """Base class for events about a principal aggregate."""

    event_type: str = ""
    id_field: str = "id"

    def __init__(self, aggregate_id: Optional[UUID], tenant_id: Optional[UUID] = None,
                 data: Optional[Dict[str, Any]] = None, **kwargs):
        payload = dict(data or {})
        payload[self.id_field] = str(aggregate_id) if aggregate_id else None
        if tenant_id:
            payload["tenant_id"] = str(tenant_id)
            kwargs.setdefault("tenant_id", str(tenant_id))
        kwargs.setdefault("category", "principal")
        super().__init__(self.event_type, payload, **kwargs)

    def _validate_event_data(self):
        if not self.data.get(self.id_field):
            raise ValueError(f"{self.event_type} events must contain {self.id_field}")


class UserCreated(PrincipalEvent):
    event_type = "UserCreated"
    id_field = "user_id"


class UserRetrieved(PrincipalEvent):
    event_type = "UserRetrieved"
    id_field = "user_id"


class UserDeleted(PrincipalEvent):
    event_type = "UserDeleted"
    id_field = "user_id"


class GroupCreated(PrincipalEvent):
    event_type = "GroupCreated"
    id_field = "group_id"


class GroupDeleted(PrincipalEvent):
    event_type = "GroupDeleted"
    id_field = "group_id"


class MachineCreated(PrincipalEvent):
    event_type = "MachineCreated"
    id_field = "machine_id"


class MachineDeleted(PrincipalEvent):
    event_type = "MachineDeleted"
    id_field = "machine_id"
