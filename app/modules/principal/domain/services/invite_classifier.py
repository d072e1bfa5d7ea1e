# 📄 File: app/modules/principal/domain/services/invite_classifier.py
# 🧭 Purpose (Layman Explanation):
# Sorts a pile of invitations into "good to send", "email looks broken" and "email is from
# a domain we don't accept" before anything is saved.
# 🧪 Purpose (Technical Summary):
# Pure classification of UserInvites by email format (strict bulk-upload pattern) and by
# host: free-mail deny list first, then the tenant's allowed domains. Input order is kept
# within each bucket.
# 🔗 Dependencies:
# app.shared.utils.validators (bulk email pattern, host extraction)
# 🔄 Connected Modules / Calls From:
# user_invite_service.py

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from app.shared.utils.validators import email_host, is_bulk_upload_email

from ..models import InviteUserStatus, UserInvite


@dataclass
class InviteClassification:
    valid: List[UserInvite] = field(default_factory=list)
    format_invalid: List[UserInvite] = field(default_factory=list)
    domain_invalid: List[UserInvite] = field(default_factory=list)


class InviteClassifier:
    """
    Classifies invite emails.

    Args:
        free_domains: Hosts of free mail providers; invites from them are rejected
    """

    def __init__(self, free_domains: Iterable[str]):
        self.free_domains = {domain.lower() for domain in free_domains}

    def classify(self, email: Optional[str], allowed_domains: Iterable[str]) -> Optional[InviteUserStatus]:
        """Failure status for the email, or None when it may be invited."""
        if not is_bulk_upload_email(email):
            return InviteUserStatus.USER_EMAIL_FORMAT_INVALID

        host = email_host(email)
        if host in self.free_domains:
            return InviteUserStatus.USER_EMAIL_DOMAIN_FREE
        if host not in {domain.lower() for domain in allowed_domains}:
            return InviteUserStatus.USER_EMAIL_NOT_DOMAIN_ALLOWED
        return None

    def partition(self, invites: Iterable[UserInvite], allowed_domains: Iterable[str]) -> InviteClassification:
        allowed = [domain.lower() for domain in allowed_domains]
        result = InviteClassification()
        for invite in invites:
            status = self.classify(invite.email, allowed)
            if status is None:
                result.valid.append(invite)
            elif status == InviteUserStatus.USER_EMAIL_FORMAT_INVALID:
                invite.status = status
                result.format_invalid.append(invite)
            else:
                invite.status = status
                result.domain_invalid.append(invite)
        return result
