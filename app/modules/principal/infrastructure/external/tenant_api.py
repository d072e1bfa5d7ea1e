# 📄 File: app/modules/principal/infrastructure/external/tenant_api.py
# 🧭 Purpose (Layman Explanation):
# Asks the tenant service which email domains (like "acme.com") a tenant owns, so invites
# can be limited to people from those domains.
# 🧪 Purpose (Technical Summary):
# Tenant microservice client. Resolves the tenant's domain ids, then fetches each domain
# concurrently and returns the lower-cased domain names. Any failure propagates as
# ExternalServiceError.
# 🔗 Dependencies:
# app.shared.infrastructure.external_apis.api_client, asyncio
# 🔄 Connected Modules / Calls From:
# user_invite_service.py, presentation dependencies (wiring)

import asyncio
from typing import List
from uuid import UUID

from app.shared.infrastructure.external_apis.api_client import ServiceClient
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


class TenantApi:

    def __init__(self, client: ServiceClient):
        self.client = client

    async def get_tenant_domain_ids(self, tenant_id: UUID) -> List[str]:
        return list(await self.client.get(f"v1/tenantsdomain/domainIds/{tenant_id}") or [])

    async def get_tenant_domain(self, tenant_domain_id: str) -> dict:
        return await self.client.get(f"v1/tenantsdomain/{tenant_domain_id}") or {}

    async def get_tenant_domains(self, tenant_id: UUID) -> List[str]:
        """Lower-cased domain names registered for the tenant."""
        domain_ids = await self.get_tenant_domain_ids(tenant_id)
        domains = await asyncio.gather(*(self.get_tenant_domain(domain_id) for domain_id in domain_ids))
        names = [domain.get("domain") or domain.get("Domain") for domain in domains]
        result = [name.lower() for name in names if name]
        logger.debug(f"Tenant {tenant_id} has {len(result)} allowed domains")
        return result
