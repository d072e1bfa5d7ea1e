# 📄 File: app/modules/principal/presentation/api/v1/user_invites.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints to invite a list of people to a tenant, resend invitations, and see who
# has been invited.
# 🧪 Purpose (Technical Summary):
# Thin FastAPI router over UserInviteService. Batch endpoints always answer 200 with one
# status per submitted invite.
# 🔗 Dependencies:
# FastAPI, principal_schemas, presentation dependencies, UserInviteService
# 🔄 Connected Modules / Calls From:
# app.api.v1.router (mounted under /v1/userinvites)

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from ....domain.services import UserInviteService
from ...dependencies import get_user_invite_service
from ..schemas import UserInviteListRequest, UserInviteResponse

user_invites_router = APIRouter()


@user_invites_router.post("", response_model=List[UserInviteResponse], summary="Invite users to a tenant")
async def create_user_invite_list(
    request: UserInviteListRequest,
    service: UserInviteService = Depends(get_user_invite_service),
) -> List[UserInviteResponse]:
    invites = [invite.to_domain() for invite in request.invites]
    results = await service.create_user_invite_list(invites, request.tenant_id)
    return [UserInviteResponse.from_domain(invite) for invite in results]


@user_invites_router.post("/resend", response_model=List[UserInviteResponse], summary="Resend invitation emails")
async def resend_email_invite(
    request: UserInviteListRequest,
    service: UserInviteService = Depends(get_user_invite_service),
) -> List[UserInviteResponse]:
    invites = [invite.to_domain() for invite in request.invites]
    results = await service.resend_email_invite(invites, request.tenant_id)
    return [UserInviteResponse.from_domain(invite) for invite in results]


@user_invites_router.get("", response_model=List[UserInviteResponse], summary="List a tenant's invites")
async def get_users_invited_for_tenant(
    tenant_id: UUID = Query(...),
    all_users: bool = Query(False, description="Include invites that were already accepted"),
    service: UserInviteService = Depends(get_user_invite_service),
) -> List[UserInviteResponse]:
    invites = await service.get_users_invited_for_tenant(tenant_id, all_users)
    return [UserInviteResponse.from_domain(invite) for invite in invites]
