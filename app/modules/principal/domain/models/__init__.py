from .group import BASIC_USER_GROUP_NAME, ORG_ADMIN_GROUP_NAME, Group
from .machine import Machine
from .user import CreateUserRequest, GetUsersParams, IdpFilter, PagingMetadata, SortOrder, User
from .user_invite import InviteUserStatus, UserInvite

__all__ = [
    "BASIC_USER_GROUP_NAME",
    "ORG_ADMIN_GROUP_NAME",
    "Group",
    "Machine",
    "CreateUserRequest",
    "GetUsersParams",
    "IdpFilter",
    "PagingMetadata",
    "SortOrder",
    "User",
    "InviteUserStatus",
    "UserInvite",
]
