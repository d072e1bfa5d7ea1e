# 📄 File: app/modules/principal/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Builds all the parts of the principal module once at startup (storage, clients for the
# license, email and tenant services, and the workflows) and hands them to each endpoint.
# 🧪 Purpose (Technical Summary):
# Composition root. PrincipalContainer wires settings into the RepositoryFactory (SQL
# document store when DATABASE_URL is set, in-memory otherwise), the ServiceClient based
# Email/Tenant clients, the LicenseApi, the event publisher and the domain services.
# FastAPI dependencies read the container from app.state so tests can override them.
# 🔗 Dependencies:
# FastAPI, app.shared.config.settings, app.shared.infrastructure (database, external_apis),
# app.shared.events.publisher, license_manager, principal domain services
# 🔄 Connected Modules / Calls From:
# app.main (lifespan), app.modules.principal.presentation.api.v1.* routers

import logging
from typing import Optional

from fastapi import Request

from app.shared.config.settings import Settings, get_settings
from app.shared.events.publisher import EventPublisher, LoggingEventPublisher
from app.shared.infrastructure.database.connection import DatabaseConnectionManager
from app.shared.infrastructure.database.repository import RepositoryFactory
from app.shared.infrastructure.database.session import DatabaseSessionManager
from app.shared.infrastructure.external_apis.api_client import ServiceClient
from license_manager import LicenseApi

from ..domain.models import Group, Machine, User, UserInvite
from ..domain.services import GroupService, InviteClassifier, MachineService, UserInviteService, UserService
from ..domain.validators import PrincipalValidators
from ..infrastructure.external import EmailApi, TenantApi

logger = logging.getLogger(__name__)


class PrincipalContainer:
    """
    Owns the long-lived objects of the principal module.

    Call ``startup`` before serving and ``shutdown`` when done.
    """

    def __init__(self, settings: Optional[Settings] = None, event_publisher: Optional[EventPublisher] = None):
        self.settings = settings or get_settings()
        self.event_publisher = event_publisher or LoggingEventPublisher()

        self.connection_manager: Optional[DatabaseConnectionManager] = None
        session_manager = None
        if self.settings.DATABASE_URL:
            self.connection_manager = DatabaseConnectionManager(self.settings.DATABASE_URL, echo=self.settings.DB_ECHO)
            session_manager = DatabaseSessionManager(self.connection_manager)
        self.repository_factory = RepositoryFactory(session_manager)

        self.email_client = self._service_client(self.settings.EMAIL_SERVICE_URL, "email")
        self.tenant_client = self._service_client(self.settings.TENANT_SERVICE_URL, "tenant")
        self.email_api = EmailApi(self.email_client)
        self.tenant_api = TenantApi(self.tenant_client)
        self.license_api = LicenseApi(
            self.settings.LICENSE_SERVICE_URL,
            security_token=self.settings.LICENSE_SERVICE_TOKEN,
            timeout=self.settings.HTTP_TIMEOUT_SECONDS,
        )

        validators = PrincipalValidators()
        users = self.repository_factory.create_repository(User)
        groups = self.repository_factory.create_repository(Group)

        self.user_service = UserService(
            user_repository=users,
            group_repository=groups,
            license_api=self.license_api,
            email_api=self.email_api,
            event_publisher=self.event_publisher,
            validators=validators,
            on_prem_deployment=self.settings.ON_PREM_DEPLOYMENT,
            built_in_tenant_ids=self.settings.built_in_on_prem_tenant_ids,
        )
        self.user_invite_service = UserInviteService(
            user_invite_repository=self.repository_factory.create_repository(UserInvite),
            user_repository=users,
            email_api=self.email_api,
            tenant_api=self.tenant_api,
            classifier=InviteClassifier(self.settings.free_email_domains),
            validators=validators,
        )
        self.group_service = GroupService(groups, self.event_publisher, validators)
        self.machine_service = MachineService(
            self.repository_factory.create_repository(Machine), self.event_publisher, validators
        )

    def _service_client(self, base_url: str, service_name: str) -> ServiceClient:
        return ServiceClient(
            base_url,
            service_name,
            timeout=self.settings.HTTP_TIMEOUT_SECONDS,
            max_retries=self.settings.HTTP_MAX_RETRIES,
        )

    async def startup(self):
        if self.connection_manager is not None:
            await self.connection_manager.initialize()
            logger.info("✅ Document database initialized")
        else:
            logger.info("✅ Using in-memory document store")

    async def shutdown(self):
        for client in (self.email_client, self.tenant_client, self.license_api):
            await client.close()
        if self.connection_manager is not None:
            await self.connection_manager.close()
        logger.info("✅ Principal module shut down")

    async def health_check(self) -> dict:
        if self.connection_manager is None:
            return {"status": "healthy", "store": "in-memory"}
        return await self.connection_manager.health_check()


# =========================================================================
# FASTAPI DEPENDENCIES
# =========================================================================

def get_container(request: Request) -> PrincipalContainer:
    return request.app.state.principal


def get_user_service(request: Request) -> UserService:
    return get_container(request).user_service


def get_user_invite_service(request: Request) -> UserInviteService:
    return get_container(request).user_invite_service


def get_group_service(request: Request) -> GroupService:
    return get_container(request).group_service


def get_machine_service(request: Request) -> MachineService:
    return get_container(request).machine_service
