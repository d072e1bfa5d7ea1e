# 📄 File: app/modules/principal/presentation/api/schemas/user_schemas.py
# 🧭 Purpose (Layman Explanation):
# The shapes of user data going in and out of the web API. Passwords never come back out.
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the users endpoints with conversions to and from
# the User domain document. Responses omit password hash and salt.
# 🔗 Dependencies:
# pydantic, app.modules.principal.domain.models, license_manager (LicenseType)
# 🔄 Connected Modules / Calls From:
# app.modules.principal.presentation.api.v1.users

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from license_manager import LicenseType

from ....domain.models import CreateUserRequest, PagingMetadata, User


class UserBase(BaseModel):
    first_name: Optional[str] = Field(None, description="User first name")
    last_name: Optional[str] = Field(None, description="User last name")
    email: Optional[str] = Field(None, description="User email address")
    user_name: Optional[str] = Field(None, description="Login name")
    ldap_id: Optional[str] = Field(None, description="Linked LDAP account")
    is_idp_user: Optional[bool] = None


class UserCreateRequest(UserBase):
    """Body of POST /v1/users."""
    password_hash: Optional[str] = None
    password_salt: Optional[str] = None
    license_type: Optional[LicenseType] = Field(None, description="Requested license; Default when omitted")

    def to_domain(self) -> CreateUserRequest:
        return CreateUserRequest(**self.model_dump())


class UserUpdateRequest(UserBase):
    """Body of PUT /v1/users/{user_id}."""
    groups: List[UUID] = Field(default_factory=list)
    tenant_id: Optional[UUID] = None
    password_hash: Optional[str] = None
    password_salt: Optional[str] = None
    is_locked: bool = False

    def to_domain(self) -> User:
        return User(**self.model_dump())


class UserResponse(UserBase):
    groups: List[UUID] = Field(default_factory=list)
    id: Optional[UUID] = None
    tenant_id: Optional[UUID] = None
    is_locked: bool = False
    created_by: Optional[UUID] = None
    created_date: Optional[datetime] = None
    last_access_date: Optional[datetime] = None

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(**user.model_dump(exclude={"password_hash", "password_salt"}))


class UserListResponse(BaseModel):
    total_count: int
    current_count: int
    current_page: int
    search_filter: Optional[str] = None
    users: List[UserResponse]

    @classmethod
    def from_domain(cls, page: PagingMetadata) -> "UserListResponse":
        return cls(
            total_count=page.total_count,
            current_count=page.current_count,
            current_page=page.current_page,
            search_filter=page.search_filter,
            users=[UserResponse.from_domain(u) for u in page.users],
        )
