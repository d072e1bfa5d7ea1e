# 📄 File: app/modules/principal/domain/models/machine.py
# 🧭 Purpose (Layman Explanation):
# A registered device (machine) belonging to a tenant, known by its unique key and location.
# 🧪 Purpose (Technical Summary):
# Machine document model. ``machine_key`` is globally unique, ``location`` is unique
# within a tenant; both are checked by the machine workflow.
# 🔗 Dependencies:
# pydantic, datetime, uuid
# 🔄 Connected Modules / Calls From:
# machine_service.py, machines API router

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class Machine(BaseModel):
    __collection__ = "Machine"

    id: Optional[UUID] = None
    machine_key: Optional[str] = None
    location: Optional[str] = None
    tenant_id: Optional[UUID] = None
    setting_profile_id: Optional[UUID] = None
    synthesis_version: Optional[str] = None
    date_created: Optional[datetime] = None
    date_modified: Optional[datetime] = None
    modified_by: Optional[UUID] = None
    last_online: Optional[datetime] = None
