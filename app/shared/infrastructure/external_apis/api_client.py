# 📄 File: app/shared/infrastructure/external_apis/api_client.py

# 🧭 Purpose (Layman Explanation):
# A reliable messenger for talking to our sibling services (email, tenant): it knocks again
# when a door is briefly closed, waits a little longer each time, and reports clearly when it gives up.

# 🧪 Purpose (Technical Summary):
# Generic async JSON-over-HTTP client for internal microservices with a lazily created
# aiohttp session, tenacity retries with exponential backoff on connection errors and
# timeouts, bearer authentication, and mapping of failures to ExternalServiceError.

# 🔗 Dependencies:
# - aiohttp: Async HTTP client
# - tenacity: Retry logic and backoff strategies

# 🔄 Connected Modules / Calls From:
# Used by: app.modules.principal.infrastructure.external.email_api,
# app.modules.principal.infrastructure.external.tenant_api

import asyncio
import logging
import time
from typing import Any, Dict, Optional

import aiohttp
from aiohttp import ClientSession, ClientTimeout
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from app.shared.core.exceptions import ExternalServiceError
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

RETRYABLE_EXCEPTIONS = (aiohttp.ClientConnectionError, asyncio.TimeoutError)


class ServiceClient:
    """
    Async HTTP client for a sibling microservice.

    Features:
    - Automatic retry with exponential backoff on transport failures
    - Bearer token authentication
    - Uniform error mapping to ExternalServiceError
    - Request statistics
    """

    def __init__(
        self,
        base_url: str,
        service_name: str,
        token: Optional[str] = None,
        timeout: int = 30,
        max_retries: int = 3,
        backoff_min: float = 0.5,
        backoff_max: float = 8.0,
        session: Optional[ClientSession] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.service_name = service_name
        self.token = token
        self.timeout = timeout
        self.max_retries = max(1, max_retries)
        self.backoff_min = backoff_min
        self.backoff_max = backoff_max
        self.session = session
        self._owns_session = session is None

        self.stats = {
            'total_requests': 0,
            'successful_requests': 0,
            'failed_requests': 0,
            'average_response_time': 0.0,
        }

    async def initialize(self):
        """Create the aiohttp session if one was not supplied."""
        if self.session is None or self.session.closed:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.timeout),
                headers=self._get_default_headers(),
            )
            self._owns_session = True
            logger.info(f"API client initialized for {self.service_name}")

    async def close(self):
        if self.session is not None and self._owns_session and not self.session.closed:
            await self.session.close()
        self.session = None

    def _get_default_headers(self) -> Dict[str, str]:
        headers = {
            'User-Agent': f'PrincipalService/1.0 ({self.service_name}-client)',
            'Accept': 'application/json',
            'Content-Type': 'application/json',
        }
        if self.token:
            headers['Authorization'] = f'Bearer {self.token}'
        return headers

    def _url(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Any] = None,
    ) -> Any:
        """
        Send a request, retrying transport failures.

        Returns:
            The decoded JSON body, or None for an empty body.

        Raises:
            ExternalServiceError: on a non-2xx status or when retries are exhausted.
        """
        url = self._url(endpoint)
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.max_retries),
                wait=wait_exponential(multiplier=self.backoff_min, min=self.backoff_min, max=self.backoff_max),
                retry=retry_if_exception_type(RETRYABLE_EXCEPTIONS),
                before_sleep=before_sleep_log(logger.logger, logging.WARNING),
                reraise=True,
            ):
                with attempt:
                    return await self._send(method, url, params, data)
        except RETRYABLE_EXCEPTIONS as e:
            self.stats['failed_requests'] += 1
            logger.error(f"{self.service_name} unreachable: {method} {url} - {e}")
            raise ExternalServiceError(
                f"{self.service_name} service is unavailable",
                service=self.service_name,
                service_response=str(e),
            ) from e

    async def _send(self, method: str, url: str, params: Optional[Dict[str, Any]], data: Optional[Any]) -> Any:
        await self.initialize()

        request_kwargs: Dict[str, Any] = {'method': method, 'url': url}
        if params:
            request_kwargs['params'] = params
        if data is not None:
            request_kwargs['json'] = data

        start_time = time.time()
        async with self.session.request(**request_kwargs) as response:
            response_time = time.time() - start_time
            self.stats['total_requests'] += 1
            if self.stats['average_response_time'] == 0:
                self.stats['average_response_time'] = response_time
            else:
                self.stats['average_response_time'] = (
                    self.stats['average_response_time'] * 0.7 + response_time * 0.3
                )

            await self._handle_response_status(response, method, url)

            body = await response.text()
            self.stats['successful_requests'] += 1
            logger.info(
                f"{self.service_name} request successful: "
                f"{method} {url} - {response.status} - {response_time:.2f}s"
            )
            if not body:
                return None
            try:
                return await response.json(content_type=None)
            except ValueError:
                return {'raw_response': body}

    async def _handle_response_status(self, response: aiohttp.ClientResponse, method: str, url: str):
        if 200 <= response.status < 300:
            return
        self.stats['failed_requests'] += 1
        response_text = await response.text()
        logger.error(
            f"{self.service_name} request failed: {method} {url} - {response.status}",
            extra={'status_code': response.status, 'service': self.service_name},
        )
        raise ExternalServiceError(
            f"{self.service_name} returned {response.status}",
            service=self.service_name,
            service_response=response_text,
            details={'status_code': response.status},
        )

    async def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self._make_request('GET', endpoint, params=params)

    async def post(self, endpoint: str, data: Optional[Any] = None, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self._make_request('POST', endpoint, params=params, data=data)

    async def put(self, endpoint: str, data: Optional[Any] = None) -> Any:
        return await self._make_request('PUT', endpoint, data=data)

    async def delete(self, endpoint: str) -> Any:
        return await self._make_request('DELETE', endpoint)

    def get_stats(self) -> Dict[str, Any]:
        return dict(self.stats, service=self.service_name)
