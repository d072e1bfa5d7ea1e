from .principal_schemas import (
    GroupCreateRequest,
    GroupDeleteResponse,
    GroupResponse,
    MachineCreateRequest,
    MachineResponse,
    UserInviteListRequest,
    UserInviteRequest,
    UserInviteResponse,
)
from .user_schemas import UserCreateRequest, UserListResponse, UserResponse, UserUpdateRequest

__all__ = [
    "GroupCreateRequest",
    "GroupDeleteResponse",
    "GroupResponse",
    "MachineCreateRequest",
    "MachineResponse",
    "UserInviteListRequest",
    "UserInviteRequest",
    "UserInviteResponse",
    "UserCreateRequest",
    "UserListResponse",
    "UserResponse",
    "UserUpdateRequest",
]
