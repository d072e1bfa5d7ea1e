from .group_service import GroupService
from .invite_classifier import InviteClassification, InviteClassifier
from .machine_service import MachineService
from .user_invite_service import UserInviteService
from .user_service import UserService

__all__ = [
    "GroupService",
    "InviteClassification",
    "InviteClassifier",
    "MachineService",
    "UserInviteService",
    "UserService",
]
