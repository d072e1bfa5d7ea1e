# 📄 File: app/modules/principal/presentation/api/schemas/principal_schemas.py
# 🧭 Purpose (Layman Explanation):
# The shapes of invitation, group and machine data going in and out of the web API.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the user invite, group and machine endpoints,
# each with a conversion to or from its domain document.
# 🔗 Dependencies:
# pydantic, app.modules.principal.domain.models
# 🔄 Connected Modules / Calls From:
# user_invites.py, groups.py, machines.py routers

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from ....domain.models import Group, InviteUserStatus, Machine, UserInvite

# ==============================================================================
# USER INVITES
# ==============================================================================


class UserInviteRequest(BaseModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None

    def to_domain(self) -> UserInvite:
        return UserInvite(**self.model_dump())


class UserInviteListRequest(BaseModel):
    """Body of POST /v1/userinvites and /v1/userinvites/resend."""
    tenant_id: UUID
    invites: List[UserInviteRequest] = Field(default_factory=list)


class UserInviteResponse(BaseModel):
    id: Optional[UUID] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    tenant_id: Optional[UUID] = None
    last_invited_date: Optional[datetime] = None
    status: Optional[InviteUserStatus] = None

    @classmethod
    def from_domain(cls, invite: UserInvite) -> "UserInviteResponse":
        return cls(**invite.model_dump())


# ==============================================================================
# GROUPS
# ==============================================================================


class GroupCreateRequest(BaseModel):
    tenant_id: UUID
    name: Optional[str] = Field(None, description="Group name, unique within the tenant")

    def to_domain(self) -> Group:
        return Group(name=self.name)


class GroupResponse(BaseModel):
    id: Optional[UUID] = None
    tenant_id: Optional[UUID] = None
    name: Optional[str] = None
    is_locked: bool = False

    @classmethod
    def from_domain(cls, group: Group) -> "GroupResponse":
        return cls(**group.model_dump())


class GroupDeleteResponse(BaseModel):
    id: Optional[UUID] = None
    deleted: bool


# ==============================================================================
# MACHINES
# ==============================================================================


class MachineCreateRequest(BaseModel):
    machine_key: Optional[str] = None
    location: Optional[str] = None
    tenant_id: Optional[UUID] = None
    setting_profile_id: Optional[UUID] = None
    synthesis_version: Optional[str] = None
    modified_by: Optional[UUID] = None

    def to_domain(self) -> Machine:
        return Machine(**self.model_dump())


class MachineResponse(MachineCreateRequest):
    id: Optional[UUID] = None
    date_created: Optional[datetime] = None
    date_modified: Optional[datetime] = None
    last_online: Optional[datetime] = None

    @classmethod
    def from_domain(cls, machine: Machine) -> "MachineResponse":
        return cls(**machine.model_dump())
