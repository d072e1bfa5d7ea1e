# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# A checkup endpoint that tells load balancers whether the service and its database
# are working.
# 🧪 Purpose (Technical Summary):
# Health check endpoint reporting service status, version and document store health.
# 🔗 Dependencies:
# FastAPI, app.shared.config.settings, principal presentation dependencies
# 🔄 Connected Modules / Calls From:
# app.main.py, monitoring systems, load balancers

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.shared.config.settings import get_settings

logger = logging.getLogger(__name__)

health_router = APIRouter()


@health_router.get("/health",
                   summary="Health Check",
                   description="Health check endpoint for load balancers and monitoring",
                   tags=["Health Check"])
async def health_check(request: Request) -> JSONResponse:
    """
    Report service health.

    Answers 503 when the document store is unhealthy.
    """
    store = {"status": "unknown"}
    container = getattr(request.app.state, "principal", None)
    if container is not None:
        store = await container.health_check()

    healthy = store.get("status") in ("healthy", "unknown")
    return JSONResponse(
        status_code=200 if healthy else 503,
        content={
            "status": "healthy" if healthy else "unhealthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": "principal-service",
            "version": get_settings().APP_VERSION,
            "store": store,
        }
    )
