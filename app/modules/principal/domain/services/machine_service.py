# 📄 File: app/modules/principal/domain/services/machine_service.py
# 🧭 Purpose (Layman Explanation):
# Registers, finds and removes machines. Every machine key must be unique, and no two
# machines of one tenant may sit at the same location.
# 🧪 Purpose (Technical Summary):
# Machine workflow over a DocumentRepository: structural validation plus global key and
# per-tenant location uniqueness accumulated into one ValidationFailedError, timestamping,
# idempotent delete and best-effort MachineCreated/MachineDeleted events.
# 🔗 Dependencies:
# DocumentRepository, EventPublisher, PrincipalValidators, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# machines API router, presentation dependencies (wiring)

import logging
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from app.shared.core.exceptions import DocumentNotFoundError, NotFoundError, ValidationFailedError
from app.shared.events.publisher import EventPublisher
from app.shared.infrastructure.database.repository import DocumentRepository

from ..events import MachineCreated, MachineDeleted
from ..models import Machine
from ..validators import PrincipalValidators

logger = logging.getLogger(__name__)


class MachineService:
    """Domain service for machines."""

    def __init__(
        self,
        machine_repository: DocumentRepository[Machine],
        event_publisher: EventPublisher,
        validators: Optional[PrincipalValidators] = None,
    ):
        self.machine_repository = machine_repository
        self.event_publisher = event_publisher
        self.validators = validators or PrincipalValidators()

    async def create_machine(self, machine: Machine) -> Machine:
        """
        Register a machine.

        Raises:
            ValidationFailedError: With every failed rule
        """
        result = self.validators.create_machine.validate(machine)

        if machine.machine_key:
            key = machine.machine_key
            if await self.machine_repository.get_items(lambda m: m.machine_key == key):
                result.add_error("MachineKey", "Machine Key was not unique")

        if machine.location:
            location = machine.location
            tenant_id = machine.tenant_id
            if await self.machine_repository.get_items(
                lambda m: m.tenant_id == tenant_id and m.location == location
            ):
                result.add_error("Location", "Location was not unique")

        if not result.is_valid:
            logger.error(f"Failed to create machine {machine.machine_key}")
            raise ValidationFailedError(result.errors)

        now = datetime.now(timezone.utc)
        machine.date_created = now
        machine.date_modified = now
        machine = await self.machine_repository.create_item(machine)
        logger.info(f"Created machine {machine.id} in tenant {machine.tenant_id}")

        await self.event_publisher.publish(MachineCreated(machine.id, machine.tenant_id))
        return machine

    async def get_machine(self, machine_id: UUID) -> Machine:
        self._validate_id(machine_id)

        machine = await self.machine_repository.get_item(machine_id)
        if machine is None:
            raise NotFoundError(f"Machine {machine_id} not found", "Machine", str(machine_id))
        return machine

    async def delete_machine(self, machine_id: UUID) -> None:
        """Delete a machine. Deleting a missing machine succeeds."""
        self._validate_id(machine_id)

        try:
            await self.machine_repository.delete_item(machine_id)
        except DocumentNotFoundError:
            logger.info(f"Machine {machine_id} already deleted")

        await self.event_publisher.publish(MachineDeleted(machine_id))

    def _validate_id(self, machine_id: UUID):
        result = self.validators.machine_id.validate(machine_id)
        if not result.is_valid:
            logger.error("Failed to validate the resource id.")
            raise ValidationFailedError(result.errors)
