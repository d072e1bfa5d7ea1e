# 📄 File: license_manager/api.py
# 🧭 Purpose (Layman Explanation):
# The client the Principal Service uses to ask the license service to hand out, take back
# or describe licenses for users and accounts.
# 🧪 Purpose (Technical Summary):
# Async aiohttp client for the license service v2 routes. Every response is a ServiceResult
# envelope; 401, other HTTP failures, non-success result codes and connection failures are
# mapped to the license_manager exception types.
# 🔗 Dependencies:
# aiohttp, pydantic (via models), logging
# 🔄 Connected Modules / Calls From:
# app.modules.principal.presentation.dependencies (wiring), user_service (license assignment)

import logging
from typing import Any, List, Optional, Type, TypeVar
from uuid import UUID

import aiohttp
from pydantic import TypeAdapter

from .exceptions import (
    FailedToConnectToLicenseServiceException,
    LicenseApiException,
    LicenseApiHttpError,
)
from .models import (
    BulkLicenseDto,
    LicenseModel,
    LicenseResponse,
    LicenseSummaryDto,
    LicenseType,
    ResultCode,
    ServiceResult,
    UserLicenseDto,
    UserLicenseResponse,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

BASE_ROUTE = "/api/v2/license"
API_ERROR_FORMAT = "API error occurred in {0}\nResult code {1} returned from {2}\n{3}"
HTTP_ERROR_FORMAT = "HTTP response code is {0} for the request to {1}"


class LicenseApi:
    """
    Client for the license service.

    Args:
        base_url: License service root, e.g. ``http://license:8080``
        security_token: Sent as a bearer token when set
        timeout: Total request timeout in seconds
        session: Optional externally managed aiohttp session
    """

    def __init__(
        self,
        base_url: str,
        security_token: Optional[str] = None,
        timeout: int = 30,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.security_token = security_token
        self.timeout = timeout
        self._session = session
        self._owns_session = session is None

    # ==========================================================================
    # LICENSE OPERATIONS
    # ==========================================================================

    async def assign_user_license(self, dto: UserLicenseDto) -> LicenseResponse:
        return await self._post("assignments", dto, LicenseResponse)

    async def release_user_license(self, dto: UserLicenseDto) -> LicenseResponse:
        return await self._post("releases", dto, LicenseResponse)

    async def assign_license_to_account_users(self, dto: BulkLicenseDto) -> LicenseResponse:
        return await self._post("bulk-licenses", dto, LicenseResponse)

    async def get_account_license_details(self, account_id: UUID) -> LicenseResponse:
        return await self._get(f"details/{account_id}", LicenseResponse)

    async def get_account_license_summary(self, account_id: UUID) -> List[LicenseSummaryDto]:
        return await self._get(f"summaries/{account_id}", List[LicenseSummaryDto])

    async def get_account_user_license_types(self, account_id: UUID) -> List[LicenseType]:
        return await self._get(f"types/{account_id}", List[LicenseType])

    async def get_user_license_details(self, account_id: UUID, user_id: UUID) -> UserLicenseResponse:
        return await self._get(f"assignments/{account_id}/{user_id}", UserLicenseResponse)

    async def refresh_licenses(self, account_id: str) -> bool:
        return bool(await self._post("refresh", account_id, bool))

    # ==========================================================================
    # TRANSPORT
    # ==========================================================================

    def format_route(self, relative_path: str) -> str:
        return f"{self.base_url}{BASE_ROUTE}/{relative_path}"

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            headers = {"Accept": "application/json"}
            if self.security_token:
                headers["Authorization"] = f"Bearer {self.security_token}"
            self._session = aiohttp.ClientSession(
                headers=headers,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            )
            self._owns_session = True
        return self._session

    async def close(self):
        if self._session is not None and self._owns_session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def _get(self, relative_path: str, payload_type: Type[T]) -> T:
        return await self._send("GET", relative_path, None, payload_type)

    async def _post(self, relative_path: str, body: Any, payload_type: Type[T]) -> T:
        if isinstance(body, LicenseModel):
            body = body.to_wire()
        return await self._send("POST", relative_path, body, payload_type)

    async def _send(self, method: str, relative_path: str, body: Any, payload_type: Type[T]) -> T:
        route = self.format_route(relative_path)
        logger.debug(f"{method}: {route}")
        try:
            async with self._get_session().request(method, route, json=body) as response:
                return await self._handle_response(response, route, relative_path, payload_type)
        except aiohttp.ClientConnectionError as e:
            logger.error(f"License service connection failed for {route}: {e}")
            raise FailedToConnectToLicenseServiceException() from e

    async def _handle_response(
        self,
        response: aiohttp.ClientResponse,
        route: str,
        operation: str,
        payload_type: Type[T],
    ) -> T:
        if response.status == 401:
            message = HTTP_ERROR_FORMAT.format(response.status, route)
            logger.error(message)
            raise LicenseApiException(message, "LicenseAPI", ResultCode.UNAUTHORIZED)

        if not 200 <= response.status < 300:
            message = HTTP_ERROR_FORMAT.format(response.status, route)
            logger.error(message)
            raise LicenseApiHttpError(message, response.status, route)

        data = await response.json(content_type=None)
        result = ServiceResult[Any].model_validate(data or {})
        if result.result_code != ResultCode.SUCCESS:
            message = API_ERROR_FORMAT.format(operation, int(result.result_code), route, result.message)
            logger.error(message)
            raise LicenseApiException(message, result.message, result.result_code)

        if result.payload is None:
            return None
        return TypeAdapter(payload_type).validate_python(result.payload)
