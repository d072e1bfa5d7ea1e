# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# The traffic director for version 1 requests: sends user, invite, group and machine
# requests to the right endpoints.
# 🧪 Purpose (Technical Summary):
# Main API v1 router aggregation combining the principal module routers under their
# route prefixes.
# 🔗 Dependencies:
# FastAPI, app.modules.principal.presentation.api.v1
# 🔄 Connected Modules / Calls From:
# app.main.py

import logging

from fastapi import APIRouter

from app.modules.principal.presentation.api.v1 import (
    groups_router,
    machines_router,
    user_invites_router,
    users_router,
)

from . import API_TAGS, ROUTE_PREFIXES

logger = logging.getLogger(__name__)

api_v1_router = APIRouter()

api_v1_router.include_router(users_router, prefix=ROUTE_PREFIXES["users"], tags=[API_TAGS["users"]])
api_v1_router.include_router(
    user_invites_router, prefix=ROUTE_PREFIXES["user_invites"], tags=[API_TAGS["user_invites"]]
)
api_v1_router.include_router(groups_router, prefix=ROUTE_PREFIXES["groups"], tags=[API_TAGS["groups"]])
api_v1_router.include_router(machines_router, prefix=ROUTE_PREFIXES["machines"], tags=[API_TAGS["machines"]])
