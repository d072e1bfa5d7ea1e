# 📄 File: app/modules/principal/domain/services/group_service.py
# 🧭 Purpose (Layman Explanation):
# Creates, finds and removes groups of users within a tenant; two groups in the same
# tenant cannot share a name.
# 🧪 Purpose (Technical Summary):
# Group workflow over a DocumentRepository with name validation, per-tenant name
# uniqueness, idempotent delete and best-effort GroupCreated/GroupDeleted events.
# 🔗 Dependencies:
# DocumentRepository, EventPublisher, PrincipalValidators, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# groups API router, presentation dependencies (wiring)

import logging
from typing import List, Optional
from uuid import UUID

from app.shared.core.exceptions import DocumentNotFoundError, NotFoundError, ValidationFailedError
from app.shared.events.publisher import EventPublisher
from app.shared.infrastructure.database.repository import DocumentRepository

from ..events import GroupCreated, GroupDeleted
from ..models import Group
from ..validators import PrincipalValidators

logger = logging.getLogger(__name__)


class GroupService:
    """Domain service for groups."""

    def __init__(
        self,
        group_repository: DocumentRepository[Group],
        event_publisher: EventPublisher,
        validators: Optional[PrincipalValidators] = None,
    ):
        self.group_repository = group_repository
        self.event_publisher = event_publisher
        self.validators = validators or PrincipalValidators()

    async def create_group(self, group: Group, tenant_id: UUID) -> Group:
        """
        Create a group in a tenant.

        Raises:
            ValidationFailedError: If the name is empty, too long or already used in the tenant
        """
        result = self.validators.create_group.validate(group)
        if group.name:
            name = group.name
            existing = await self.group_repository.get_items(
                lambda g: g.tenant_id == tenant_id and g.name == name
            )
            if existing:
                result.add_error("Name", "A group with that Group name already exists.")

        if not result.is_valid:
            logger.error(f"Failed to create group {group.name} in tenant {tenant_id}")
            raise ValidationFailedError(result.errors)

        group.tenant_id = tenant_id
        group = await self.group_repository.create_item(group)
        logger.info(f"Created group {group.id} in tenant {tenant_id}")

        await self.event_publisher.publish(GroupCreated(group.id, tenant_id))
        return group

    async def get_group(self, group_id: UUID) -> Group:
        self._validate_id(group_id)

        group = await self.group_repository.get_item(group_id)
        if group is None:
            raise NotFoundError(f"Group {group_id} not found", "Group", str(group_id))
        return group

    async def get_groups_for_tenant(self, tenant_id: UUID) -> List[Group]:
        return await self.group_repository.get_items(lambda g: g.tenant_id == tenant_id)

    async def delete_group(self, group_id: UUID) -> Optional[UUID]:
        """
        Delete a group.

        Returns:
            The deleted group's id, or None when the group did not exist
        """
        self._validate_id(group_id)

        try:
            await self.group_repository.delete_item(group_id)
        except DocumentNotFoundError:
            logger.info(f"Group {group_id} already deleted")
            return None

        await self.event_publisher.publish(GroupDeleted(group_id))
        return group_id

    def _validate_id(self, group_id: UUID):
        result = self.validators.group_id.validate(group_id)
        if not result.is_valid:
            logger.error("Failed to validate the resource id.")
            raise ValidationFailedError(result.errors)
