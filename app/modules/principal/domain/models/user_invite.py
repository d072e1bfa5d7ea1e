# 📄 File: app/modules/principal/domain/models/user_invite.py
# 🧭 Purpose (Layman Explanation):
# An invitation for someone to join a tenant, and the label explaining what happened to it
# (sent, duplicate, bad email, blocked domain...).
# 🧪 Purpose (Technical Summary):
# UserInvite document model and the closed InviteUserStatus classification returned by
# the invite workflow. ``status`` is transient and only meaningful in responses.
# 🔗 Dependencies:
# pydantic, datetime, enum, uuid
# 🔄 Connected Modules / Calls From:
# user_invite_service.py, invite_classifier.py, email_api.py, user invites API router

from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class InviteUserStatus(str, Enum):
    SUCCESS = "Success"
    USER_EMAIL_FORMAT_INVALID = "UserEmailFormatInvalid"
    USER_EMAIL_DOMAIN_FREE = "UserEmailDomainFree"
    USER_EMAIL_NOT_DOMAIN_ALLOWED = "UserEmailNotDomainAllowed"
    DUPLICATE_USER_EMAIL = "DuplicateUserEmail"
    DUPLICATE_USER_ENTRY = "DuplicateUserEntry"
    USER_NOT_EXIST = "UserNotExist"


class UserInvite(BaseModel):
    __collection__ = "UserInvite"

    id: Optional[UUID] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    tenant_id: Optional[UUID] = None
    last_invited_date: Optional[datetime] = None
    status: Optional[InviteUserStatus] = None
