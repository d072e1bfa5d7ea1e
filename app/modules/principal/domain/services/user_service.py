# 📄 File: app/modules/principal/domain/services/user_service.py
# 🧭 Purpose (Layman Explanation):
# Creates, finds, changes and removes users. When a user is created it checks every rule
# at once, gives the user a license, and locks the account if no license could be given.
# 🧪 Purpose (Technical Summary):
# User workflow over a DocumentRepository. Structural, tenant and uniqueness failures are
# accumulated into one ValidationFailedError before any write. After persistence a license
# is requested from the License service; failure degrades to a locked account plus a
# best-effort notification of the tenant's Org_Admin members. Returned users are scrubbed
# of password secrets. Events are published best-effort.
# 🔗 Dependencies:
# DocumentRepository, license_manager (LicenseApi, UserLicenseDto), EmailApi,
# EventPublisher, PrincipalValidators, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# users API router, presentation dependencies (wiring)

import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional
from uuid import UUID

from app.shared.core.exceptions import DocumentNotFoundError, NotFoundError, ValidationFailedError
from app.shared.events.publisher import EventPublisher
from app.shared.infrastructure.database.repository import DocumentRepository
from app.shared.utils.validators import ValidationResult
from license_manager import LicenseApi, LicenseType, UserLicenseDto

from ..events import UserCreated, UserDeleted, UserRetrieved
from ..models import (
    BASIC_USER_GROUP_NAME,
    ORG_ADMIN_GROUP_NAME,
    CreateUserRequest,
    GetUsersParams,
    Group,
    IdpFilter,
    PagingMetadata,
    SortOrder,
    User,
)
from ..validators import PrincipalValidators

logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    "firstname": lambda u: (u.first_name or "").lower(),
    "lastname": lambda u: (u.last_name or "").lower(),
    "email": lambda u: (u.email or "").lower(),
    "username": lambda u: (u.user_name or "").lower(),
}
DEFAULT_SORT_COLUMN = "firstname"


class UserService:
    """
    Domain service for user management.

    Args:
        user_repository: Store for User documents
        group_repository: Store for Group documents (built-in group lookups)
        license_api: License service client
        email_api: Email service client
        event_publisher: Best-effort domain event publisher
        validators: Request validators; defaults are used when omitted
        on_prem_deployment: Whether reserved on-prem tenants are enforced
        built_in_tenant_ids: Tenants users may not be created under on-prem
    """

    def __init__(
        self,
        user_repository: DocumentRepository[User],
        group_repository: DocumentRepository[Group],
        license_api: LicenseApi,
        email_api,
        event_publisher: EventPublisher,
        validators: Optional[PrincipalValidators] = None,
        on_prem_deployment: bool = False,
        built_in_tenant_ids: Iterable[UUID] = (),
    ):
        self.user_repository = user_repository
        self.group_repository = group_repository
        self.license_api = license_api
        self.email_api = email_api
        self.event_publisher = event_publisher
        self.validators = validators or PrincipalValidators()
        self.on_prem_deployment = on_prem_deployment
        self.built_in_tenant_ids = set(built_in_tenant_ids)

    # =========================================================================
    # USER CREATION
    # =========================================================================

    async def create_user(self, request: CreateUserRequest, tenant_id: UUID, created_by: Optional[UUID]) -> User:
        """
        Create a user in a tenant and assign it a license.

        Args:
            request: User fields plus an optional license type
            tenant_id: Owning tenant
            created_by: Id of the principal performing the creation

        Returns:
            The stored user without password secrets. The user is locked when
            no license could be assigned.

        Raises:
            ValidationFailedError: With every failed rule when the request is rejected
        """
        result = self.validators.create_user.validate(request)
        result.extend(await self._validate_new_user(request, tenant_id))
        if not result.is_valid:
            logger.error(f"Failed to create user {request.user_name}: {len(result.errors)} validation errors")
            raise ValidationFailedError(result.errors)

        user = request.to_user()
        user.tenant_id = tenant_id
        user.created_by = created_by
        user.created_date = datetime.now(timezone.utc)
        user.first_name = user.first_name.strip()
        user.last_name = user.last_name.strip()

        # membership is never taken from the request; new users join Basic_User only
        user.groups = []
        basic_user_group = await self._find_locked_group(tenant_id, BASIC_USER_GROUP_NAME)
        if basic_user_group is not None:
            user.groups = [basic_user_group.id]

        user = await self.user_repository.create_item(user)
        logger.info(f"Created user {user.id} in tenant {tenant_id}")

        user = await self._assign_license(user, request.license_type)

        await self.event_publisher.publish(UserCreated(user.id, tenant_id))
        return user.scrubbed()

    async def _validate_new_user(self, request: CreateUserRequest, tenant_id: UUID) -> ValidationResult:
        result = ValidationResult()

        if self.on_prem_deployment and tenant_id in self.built_in_tenant_ids:
            result.add_error("TenantId", "Users cannot be created under provisioning tenant")

        if request.user_name:
            taken = await self.user_repository.get_items(lambda u: u.user_name == request.user_name)
            if taken:
                result.add_error("UserName", "A user with that UserName already exists.")

        if request.email:
            taken = await self.user_repository.get_items(lambda u: u.email == request.email)
            if taken:
                result.add_error("Email", "A user with that email address already exists.")

        if request.ldap_id:
            taken = await self.user_repository.get_items(lambda u: u.ldap_id == request.ldap_id)
            if taken:
                result.add_error("LdapId", "Unable to provision user. The LDAP User Account is already in use.")

        return result

    async def _assign_license(self, user: User, license_type: Optional[LicenseType]) -> User:
        dto = UserLicenseDto(
            account_id=str(user.tenant_id),
            user_id=str(user.id),
            license_type=(license_type or LicenseType.DEFAULT).wire_name,
        )
        try:
            response = await self.license_api.assign_user_license(dto)
            assigned = response is not None and response.is_success
        except Exception as e:
            logger.error(f"License assignment failed for user {user.id}: {e}")
            assigned = False

        if assigned:
            await self._send_welcome_email(user)
            return user

        return await self._lock_user(user)

    async def _send_welcome_email(self, user: User):
        try:
            sent = await self.email_api.send_welcome_email(user.email, user.first_name)
        except Exception as e:
            logger.error(f"Welcome email for user {user.id} failed: {e}")
            return
        if not sent:
            logger.warning(f"Welcome email for user {user.id} was not sent")

    async def _lock_user(self, user: User) -> User:
        """Lock a user that could not be licensed and tell the tenant's admins."""
        stored = await self.user_repository.get_item(user.id) or user
        stored.is_locked = True
        stored = await self.user_repository.update_item(stored.id, stored)
        logger.warning(f"User {stored.id} locked: no license could be assigned")

        try:
            org_admins = await self._get_group_members(stored.tenant_id, ORG_ADMIN_GROUP_NAME)
            if org_admins:
                await self.email_api.send_user_locked_mail(org_admins, stored.full_name, stored.email)
        except Exception as e:
            logger.error(f"User locked notification for {stored.id} failed: {e}")

        return stored

    async def _find_locked_group(self, tenant_id: UUID, name: str) -> Optional[Group]:
        groups = await self.group_repository.get_items(
            lambda g: g.tenant_id == tenant_id and g.is_locked and g.name == name
        )
        return groups[0] if groups else None

    async def _get_group_members(self, tenant_id: UUID, group_name: str) -> List[User]:
        group = await self._find_locked_group(tenant_id, group_name)
        if group is None:
            return []
        return await self.user_repository.get_items(
            lambda u: u.tenant_id == tenant_id and group.id in u.groups
        )

    # =========================================================================
    # USER LOOKUP AND MAINTENANCE
    # =========================================================================

    async def get_user(self, user_id: UUID) -> User:
        """
        Get a user by id.

        Raises:
            ValidationFailedError: If the id is empty
            NotFoundError: If no such user exists
        """
        self._validate_id(user_id)

        user = await self.user_repository.get_item(user_id)
        await self.event_publisher.publish(UserRetrieved(user_id, user.tenant_id if user else None))
        if user is None:
            raise NotFoundError(f"User {user_id} not found", "User", str(user_id))

        return user.scrubbed()

    async def update_user(self, user_id: UUID, user: User) -> Optional[User]:
        """
        Replace a stored user.

        Returns:
            The updated user, or None when it does not exist
        """
        result = self.validators.user_id.validate(user_id)
        result.extend(self.validators.create_user.validate(user))
        if not result.is_valid:
            logger.error(f"Failed to update user {user_id}")
            raise ValidationFailedError(result.errors)

        user.id = user_id
        try:
            updated = await self.user_repository.update_item(user_id, user)
        except DocumentNotFoundError:
            logger.info(f"User {user_id} not found for update")
            return None
        return updated.scrubbed()

    async def delete_user(self, user_id: UUID) -> None:
        """Delete a user. Deleting a missing user succeeds and publishes nothing."""
        self._validate_id(user_id)

        try:
            await self.user_repository.delete_item(user_id)
        except DocumentNotFoundError:
            logger.info(f"User {user_id} already deleted")
            return

        await self.event_publisher.publish(UserDeleted(user_id))

    async def get_users_for_tenant(self, tenant_id: UUID, params: Optional[GetUsersParams] = None) -> PagingMetadata:
        """
        List a tenant's users with search, sorting and paging.

        Args:
            tenant_id: Tenant to list
            params: Search value, sort column/order, page number/size and idp
                filter. A page size of 0 returns every match.

        Returns:
            PagingMetadata with the tenant's total user count and the matches
        """
        result = self.validators.tenant_id.validate(tenant_id)
        if not result.is_valid:
            raise ValidationFailedError(result.errors)
        params = params or GetUsersParams()

        users = await self.user_repository.get_items(lambda u: u.tenant_id == tenant_id)
        total_count = len(users)

        users = [u for u in users if _matches_idp_filter(u, params.idp_filter)]

        search = (params.search_value or "").strip().lower()
        if search:
            users = [
                u for u in users
                if search in f"{u.first_name or ''} {u.last_name or ''}".lower()
                or search in (u.email or "").lower()
                or search in (u.user_name or "").lower()
            ]

        sort_column = (params.sort_column or DEFAULT_SORT_COLUMN).lower()
        sort_key = SORT_COLUMNS.get(sort_column, SORT_COLUMNS[DEFAULT_SORT_COLUMN])
        users.sort(key=sort_key, reverse=params.sort_order == SortOrder.DESCENDING)
        current_count = len(users)

        if params.page_size > 0:
            skip = (params.page_number - 1 if params.page_number > 0 else 0) * params.page_size
            users = users[skip:skip + params.page_size]

        return PagingMetadata(
            total_count=total_count,
            current_count=current_count,
            current_page=params.page_number,
            search_filter=params.search_value,
            users=[u.scrubbed() for u in users],
        )

    def _validate_id(self, user_id: UUID):
        result = self.validators.user_id.validate(user_id)
        if not result.is_valid:
            logger.error("Failed to validate the resource id.")
            raise ValidationFailedError(result.errors)


def _matches_idp_filter(user: User, idp_filter: IdpFilter) -> bool:
    if idp_filter == IdpFilter.IDP_USERS:
        return user.is_idp_user is True
    if idp_filter == IdpFilter.LOCAL_USERS:
        return user.is_idp_user is False
    if idp_filter == IdpFilter.NOT_SET:
        return user.is_idp_user is None
    return True
