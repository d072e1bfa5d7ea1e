# 📄 File: app/modules/principal/domain/models/user.py
# 🧭 Purpose (Layman Explanation):
# Defines what a "user" is for a tenant: name, email, login name, password secrets,
# whether the account is locked, and which groups the user belongs to.
# 🧪 Purpose (Technical Summary):
# Pydantic document models for the User aggregate, the create request (which may carry a
# requested license type) and the paged listing query/result. Field rules are enforced by
# the validators module so that all failures can be reported together.
# 🔗 Dependencies:
# pydantic, datetime, typing, uuid, license_manager.models (LicenseType)
# 🔄 Connected Modules / Calls From:
# user_service.py, validators.py, users API router and schemas

from datetime import datetime
from enum import Enum
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from license_manager.models import LicenseType


class User(BaseModel):
    """
    User document.

    ``password_hash`` and ``password_salt`` are required at creation and are
    never returned to callers; see ``scrubbed``.
    """
    __collection__ = "User"

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[UUID] = None
    tenant_id: Optional[UUID] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    user_name: Optional[str] = None
    ldap_id: Optional[str] = None
    password_hash: Optional[str] = None
    password_salt: Optional[str] = None
    is_locked: bool = False
    is_idp_user: Optional[bool] = None
    groups: List[UUID] = Field(default_factory=list)
    created_by: Optional[UUID] = None
    created_date: Optional[datetime] = None
    last_access_date: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    def scrubbed(self) -> "User":
        """Copy of the user without password secrets."""
        return self.model_copy(update={"password_hash": None, "password_salt": None})


class CreateUserRequest(User):
    """User creation payload; may request a specific license type."""
    license_type: Optional[LicenseType] = None

    def to_user(self) -> User:
        return User.model_validate(self.model_dump(exclude={"license_type"}))


class IdpFilter(str, Enum):
    ALL = "all"
    IDP_USERS = "idp_users"
    LOCAL_USERS = "local_users"
    NOT_SET = "not_set"


class SortOrder(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


class GetUsersParams(BaseModel):
    """Search, sort and paging options for listing a tenant's users."""
    search_value: Optional[str] = None
    sort_column: Optional[str] = None
    sort_order: SortOrder = SortOrder.ASCENDING
    page_number: int = 0
    page_size: int = 0
    idp_filter: IdpFilter = IdpFilter.ALL


class PagingMetadata(BaseModel):
    total_count: int
    current_count: int
    current_page: int
    search_filter: Optional[str] = None
    users: List[User]
