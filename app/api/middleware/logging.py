# 📄 File: app/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a diary of every request made to the service: what was asked, for which tenant,
# how long it took and whether it failed.
# 🧪 Purpose (Technical Summary):
# Request logging middleware. Assigns or propagates an X-Request-ID, binds request and
# tenant ids to the logging context for the duration of the request, and logs request,
# response and error records with timing and sensitive query parameters filtered.
# 🔗 Dependencies:
# FastAPI/Starlette, app.shared.utils.logging
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware registration)

import time
import uuid
from typing import Dict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.utils.logging import get_logger, log_context

from . import should_exclude_path

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware.

    Features:
    - Request/response timing
    - Correlation ids (X-Request-ID) bound to every log record
    - Tenant context taken from the tenant_id query parameter
    """

    request_id_header = "X-Request-ID"
    sensitive_params = {"password", "token", "secret", "password_hash", "password_salt"}
    slow_request_threshold = 2.0

    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(self, request: Request, call_next) -> Response:
        if should_exclude_path("logging", request.url.path):
            return await call_next(request)

        request_id = request.headers.get(self.request_id_header.lower()) or str(uuid.uuid4())
        request.state.request_id = request_id
        tenant_id = request.query_params.get("tenant_id")

        with log_context(request_id=request_id, tenant_id=tenant_id):
            start_time = time.time()
            logger.info(
                f"{request.method} {request.url.path}",
                event_type="http_request",
                query_params=self._filter_sensitive_params(dict(request.query_params)),
            )
            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    f"{request.method} {request.url.path} failed: {e}",
                    event_type="http_error",
                    exception_type=type(e).__name__,
                    processing_time_ms=round((time.time() - start_time) * 1000, 2),
                )
                raise

            processing_time = time.time() - start_time
            logger.info(
                f"{request.method} {request.url.path} - {response.status_code}",
                event_type="http_response",
                status_code=response.status_code,
                processing_time_ms=round(processing_time * 1000, 2),
                performance="slow" if processing_time > self.slow_request_threshold else "normal",
            )
            response.headers[self.request_id_header] = request_id
            return response

    def _filter_sensitive_params(self, params: Dict[str, str]) -> Dict[str, str]:
        return {
            key: "[REDACTED]" if key.lower() in self.sensitive_params else value
            for key, value in params.items()
        }
