# 📄 File: app/modules/principal/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The business rules for users, invites, groups and machines.
# 🧪 Purpose (Technical Summary):
# Domain layer re-exports: document models, validators, domain events and services.
# 🔗 Dependencies:
# models, validators, events, services subpackages
# 🔄 Connected Modules / Calls From:
# presentation layer, tests

from .events import (
    GroupCreated,
    GroupDeleted,
    MachineCreated,
    MachineDeleted,
    UserCreated,
    UserDeleted,
    UserRetrieved,
)
from .models import Group, InviteUserStatus, Machine, User, UserInvite
from .services import GroupService, InviteClassifier, MachineService, UserInviteService, UserService
from .validators import PrincipalValidators

__all__ = [
    "Group",
    "InviteUserStatus",
    "Machine",
    "User",
    "UserInvite",
    "PrincipalValidators",
    "GroupService",
    "InviteClassifier",
    "MachineService",
    "UserInviteService",
    "UserService",
    "GroupCreated",
    "GroupDeleted",
    "MachineCreated",
    "MachineDeleted",
    "UserCreated",
    "UserDeleted",
    "UserRetrieved",
]
