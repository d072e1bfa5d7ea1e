# 📄 File: app/modules/principal/presentation/api/v1/groups.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints to create, look up and remove groups.
# 🧪 Purpose (Technical Summary):
# Thin FastAPI router over GroupService.
# 🔗 Dependencies:
# FastAPI, principal_schemas, presentation dependencies, GroupService
# 🔄 Connected Modules / Calls From:
# app.api.v1.router (mounted under /v1/groups)

from uuid import UUID

from fastapi import APIRouter, Depends, status

from ....domain.services import GroupService
from ...dependencies import get_group_service
from ..schemas import GroupCreateRequest, GroupDeleteResponse, GroupResponse

groups_router = APIRouter()


@groups_router.post("", response_model=GroupResponse, status_code=status.HTTP_201_CREATED, summary="Create a group")
async def create_group(
    request: GroupCreateRequest,
    group_service: GroupService = Depends(get_group_service),
) -> GroupResponse:
    group = await group_service.create_group(request.to_domain(), request.tenant_id)
    return GroupResponse.from_domain(group)


@groups_router.get("/{group_id}", response_model=GroupResponse, summary="Get a group")
async def get_group(
    group_id: UUID,
    group_service: GroupService = Depends(get_group_service),
) -> GroupResponse:
    return GroupResponse.from_domain(await group_service.get_group(group_id))


@groups_router.delete("/{group_id}", response_model=GroupDeleteResponse, summary="Delete a group")
async def delete_group(
    group_id: UUID,
    group_service: GroupService = Depends(get_group_service),
) -> GroupDeleteResponse:
    deleted_id = await group_service.delete_group(group_id)
    return GroupDeleteResponse(id=deleted_id, deleted=deleted_id is not None)
