from .principal_events import (
    GroupCreated,
    GroupDeleted,
    MachineCreated,
    MachineDeleted,
    PrincipalEvent,
    UserCreated,
    UserDeleted,
    UserRetrieved,
)

__all__ = [
    "GroupCreated",
    "GroupDeleted",
    "MachineCreated",
    "MachineDeleted",
    "PrincipalEvent",
    "UserCreated",
    "UserDeleted",
    "UserRetrieved",
]
