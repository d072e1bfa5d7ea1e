# 📄 File: app/modules/principal/domain/models/group.py
# 🧭 Purpose (Layman Explanation):
# A named group of users inside a tenant. Some groups, like the administrators group,
# come built in and are locked.
# 🧪 Purpose (Technical Summary):
# Group document model plus the names of the built-in locked groups consulted by the
# user workflow.
# 🔗 Dependencies:
# pydantic, uuid
# 🔄 Connected Modules / Calls From:
# group_service.py, user_service.py, groups API router

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

ORG_ADMIN_GROUP_NAME = "Org_Admin"
BASIC_USER_GROUP_NAME = "Basic_User"


class Group(BaseModel):
    __collection__ = "Group"

    id: Optional[UUID] = None
    tenant_id: Optional[UUID] = None
    name: Optional[str] = None
    is_locked: bool = False
