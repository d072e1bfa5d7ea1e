# 📄 File: app/modules/principal/domain/services/user_invite_service.py
# 🧭 Purpose (Layman Explanation):
# Handles inviting people to a tenant: checks each email, skips people who are already
# users or already invited, saves the new invitations, emails them, and can resend later.
# 🧪 Purpose (Technical Summary):
# Invite workflow. Classifies a batch (format, free domain, tenant domain), reconciles the
# valid part against existing Users/UserInvites (case-insensitive), persists survivors,
# sends one batch email and stamps last_invited_date only when the send succeeded. Every
# input invite comes back with a status.
# 🔗 Dependencies:
# DocumentRepository, EmailApi, TenantApi, InviteClassifier, app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# user invites API router, presentation dependencies (wiring)

import logging
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from app.shared.core.exceptions import ValidationFailedError
from app.shared.infrastructure.database.repository import DocumentRepository

from ..models import InviteUserStatus, User, UserInvite
from ..validators import PrincipalValidators
from .invite_classifier import InviteClassifier

logger = logging.getLogger(__name__)


class UserInviteService:
    """
    Domain service for user invitations.
    """

    def __init__(
        self,
        user_invite_repository: DocumentRepository[UserInvite],
        user_repository: DocumentRepository[User],
        email_api,
        tenant_api,
        classifier: InviteClassifier,
        validators: Optional[PrincipalValidators] = None,
    ):
        self.user_invite_repository = user_invite_repository
        self.user_repository = user_repository
        self.email_api = email_api
        self.tenant_api = tenant_api
        self.classifier = classifier
        self.validators = validators or PrincipalValidators()

    # =========================================================================
    # INVITE CREATION
    # =========================================================================

    async def create_user_invite_list(self, invites: List[UserInvite], tenant_id: UUID) -> List[UserInvite]:
        """
        Invite a batch of users to a tenant.

        Args:
            invites: Invites to create; each is returned with a status
            tenant_id: Tenant the invites belong to

        Returns:
            Stored invites, then stored and in-batch duplicates, then invites
            with a malformed email, then invites from a rejected domain

        Raises:
            ExternalServiceError: If the tenant domains cannot be read or the
                email service is unreachable
        """
        allowed_domains = await self.tenant_api.get_tenant_domains(tenant_id)
        if not allowed_domains:
            logger.warning(f"Tenant {tenant_id} has no allowed domains; every invite will be rejected")

        classification = self.classifier.partition(invites, allowed_domains)

        results: List[UserInvite] = []
        if classification.valid:
            for invite in classification.valid:
                invite.tenant_id = tenant_id
            results = await self._create_user_invites_in_db(classification.valid)
            await self._send_user_invites(results)

        results.extend(classification.format_invalid)
        results.extend(classification.domain_invalid)

        logger.info(
            f"Processed {len(invites)} invites for tenant {tenant_id}: "
            f"{sum(1 for i in results if i.status == InviteUserStatus.SUCCESS)} created"
        )
        return results

    async def _create_user_invites_in_db(self, invites: List[UserInvite]) -> List[UserInvite]:
        invited_emails = {invite.email.lower() for invite in invites}

        existing_users = await self.user_repository.get_items(
            lambda u: bool(u.email) and u.email.lower() in invited_emails
        )
        existing_invites = await self.user_invite_repository.get_items(
            lambda i: bool(i.email) and i.email.lower() in invited_emails
        )
        existing_emails = {u.email.lower() for u in existing_users} | {i.email.lower() for i in existing_invites}

        duplicates = [invite for invite in invites if invite.email.lower() in existing_emails]
        for invite in duplicates:
            invite.status = InviteUserStatus.DUPLICATE_USER_EMAIL

        created: List[UserInvite] = []
        created_emails = set()
        for invite in invites:
            email = invite.email.lower()
            if email in existing_emails:
                continue
            if email in created_emails:
                invite.status = InviteUserStatus.DUPLICATE_USER_ENTRY
                duplicates.append(invite)
                continue

            invite.status = InviteUserStatus.SUCCESS
            stored = await self.user_invite_repository.create_item(invite)
            invite.id = stored.id
            created.append(invite)
            created_emails.add(email)

        return created + duplicates

    async def _send_user_invites(self, invites: List[UserInvite]) -> List[UserInvite]:
        """Email the sendable invites; stamp last_invited_date only if the send succeeded."""
        sendable = [
            invite for invite in invites
            if invite.status not in (InviteUserStatus.DUPLICATE_USER_EMAIL, InviteUserStatus.DUPLICATE_USER_ENTRY)
        ]
        if not sendable:
            return sendable

        sent = await self.email_api.send_user_invite(sendable)
        if not sent:
            logger.warning(f"Invite email send failed for {len(sendable)} invites")
            return sendable

        invited_at = datetime.now(timezone.utc)
        for invite in sendable:
            invite.last_invited_date = invited_at
            await self._update_last_invited_date(invite, invited_at)
        return sendable

    async def _update_last_invited_date(self, invite: UserInvite, invited_at: datetime):
        email = invite.email.lower()
        stored = await self.user_invite_repository.get_items(
            lambda i: bool(i.email) and i.email.lower() == email
        )
        for stored_invite in stored:
            stored_invite.last_invited_date = invited_at
            await self.user_invite_repository.update_item(stored_invite.id, stored_invite)

    # =========================================================================
    # RESEND AND LISTING
    # =========================================================================

    async def resend_email_invite(self, invites: List[UserInvite], tenant_id: UUID) -> List[UserInvite]:
        """
        Resend invitation emails to already invited users.

        Invites with no stored counterpart are marked UserNotExist and skipped.

        Returns:
            Every input invite, in input order
        """
        if not invites:
            return []

        for invite in invites:
            email = (invite.email or "").lower()
            existing = await self.user_invite_repository.get_items(
                lambda i: bool(i.email) and i.email.lower() == email
            ) if email else []
            if not existing:
                invite.status = InviteUserStatus.USER_NOT_EXIST
            else:
                invite.tenant_id = tenant_id

        resendable = [invite for invite in invites if invite.status != InviteUserStatus.USER_NOT_EXIST]
        await self._send_user_invites(resendable)
        return invites

    async def get_users_invited_for_tenant(self, tenant_id: UUID, all_users: bool = False) -> List[UserInvite]:
        """
        List a tenant's invites.

        Unless all_users is set, invites whose email already belongs to a
        user of the tenant (accepted invites) are left out.
        """
        result = self.validators.tenant_id.validate(tenant_id)
        if not result.is_valid:
            logger.error("Failed to validate the resource id.")
            raise ValidationFailedError(result.errors)

        invites = await self.user_invite_repository.get_items(lambda i: i.tenant_id == tenant_id)
        if all_users:
            return invites

        invited_emails = {i.email.lower() for i in invites if i.email}
        tenant_users = await self.user_repository.get_items(
            lambda u: u.tenant_id == tenant_id and bool(u.email) and u.email.lower() in invited_emails
        )
        user_emails = {u.email.lower() for u in tenant_users}
        return [i for i in invites if not i.email or i.email.lower() not in user_emails]
