# 📄 File: app/modules/principal/presentation/api/v1/users.py
# 🧭 Purpose (Layman Explanation):
# Web endpoints to create, look up, change, remove and list the users of a tenant.
# 🧪 Purpose (Technical Summary):
# Thin FastAPI router over UserService. Domain exceptions propagate to the application's
# PrincipalServiceException handler; update of a missing user answers 404 from the None
# the service returns.
# 🔗 Dependencies:
# FastAPI, user_schemas, presentation dependencies, UserService
# 🔄 Connected Modules / Calls From:
# app.api.v1.router (mounted under /v1/users)

"""
Users API Endpoints

Endpoints:
- POST /: Create a user in a tenant (license assigned, locked on failure)
- GET /: List a tenant's users with search, sort and paging
- GET /{user_id}: Get a user
- PUT /{user_id}: Replace a user
- DELETE /{user_id}: Delete a user (idempotent)
"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from ....domain.models import GetUsersParams, IdpFilter, SortOrder
from ....domain.services import UserService
from ...dependencies import get_user_service
from ..schemas import UserCreateRequest, UserListResponse, UserResponse, UserUpdateRequest

logger = logging.getLogger(__name__)

users_router = APIRouter()


@users_router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
    responses={
        400: {"description": "One or more validation rules failed"},
    }
)
async def create_user(
    request: UserCreateRequest,
    tenant_id: UUID = Query(..., description="Tenant the user is created in"),
    created_by: Optional[UUID] = Query(None, description="Principal performing the creation"),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await user_service.create_user(request.to_domain(), tenant_id, created_by)
    return UserResponse.from_domain(user)


@users_router.get(
    "",
    response_model=UserListResponse,
    summary="List a tenant's users",
)
async def get_users_for_tenant(
    tenant_id: UUID = Query(...),
    search_value: Optional[str] = Query(None),
    sort_column: Optional[str] = Query(None, description="firstname, lastname, email or username"),
    sort_order: SortOrder = Query(SortOrder.ASCENDING),
    page_number: int = Query(0, ge=0),
    page_size: int = Query(0, ge=0, description="0 returns every match"),
    idp_filter: IdpFilter = Query(IdpFilter.ALL),
    user_service: UserService = Depends(get_user_service),
) -> UserListResponse:
    params = GetUsersParams(
        search_value=search_value,
        sort_column=sort_column,
        sort_order=sort_order,
        page_number=page_number,
        page_size=page_size,
        idp_filter=idp_filter,
    )
    page = await user_service.get_users_for_tenant(tenant_id, params)
    return UserListResponse.from_domain(page)


@users_router.get("/{user_id}", response_model=UserResponse, summary="Get a user")
async def get_user(
    user_id: UUID,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await user_service.get_user(user_id)
    return UserResponse.from_domain(user)


@users_router.put("/{user_id}", response_model=UserResponse, summary="Update a user")
async def update_user(
    user_id: UUID,
    request: UserUpdateRequest,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = await user_service.update_user(user_id, request.to_domain())
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User {user_id} not found")
    return UserResponse.from_domain(user)


@users_router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a user")
async def delete_user(
    user_id: UUID,
    user_service: UserService = Depends(get_user_service),
) -> Response:
    await user_service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
