# 📄 File: app/modules/principal/infrastructure/external/email_api.py
# 🧭 Purpose (Layman Explanation):
# Asks the email service to send invitation, welcome and "account locked" emails.
# 🧪 Purpose (Technical Summary):
# Client for the email microservice built on ServiceClient. Each send returns one
# batch-level boolean: True on a 2xx answer, False when the service answered with an
# error status. Transport failures (service unreachable after retries) propagate as
# ExternalServiceError.
# 🔗 Dependencies:
# app.shared.infrastructure.external_apis.api_client (aiohttp + tenacity), pydantic
# 🔄 Connected Modules / Calls From:
# user_invite_service.py, user_service.py, presentation dependencies (wiring)

from typing import Any, Iterable, List, Optional

from pydantic import BaseModel

from app.shared.core.exceptions import ExternalServiceError
from app.shared.infrastructure.external_apis.api_client import ServiceClient
from app.shared.utils.logging import get_logger

from ...domain.models import User, UserInvite

logger = get_logger(__name__)


class UserEmailRequest(BaseModel):
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class LockUserRequest(BaseModel):
    org_admins: List[UserEmailRequest]
    user_full_name: str
    user_email: Optional[str] = None


class EmailApi:
    """Email microservice client."""

    def __init__(self, client: ServiceClient):
        self.client = client

    async def send_user_invite(self, invites: Iterable[UserInvite]) -> bool:
        request = [
            UserEmailRequest(email=invite.email, first_name=invite.first_name, last_name=invite.last_name)
            for invite in invites
        ]
        return await self._send("v1/userinvites", [item.model_dump() for item in request])

    async def send_welcome_email(self, email: str, first_name: Optional[str]) -> bool:
        request = UserEmailRequest(email=email, first_name=first_name)
        return await self._send("v1/sendwelcomeemail", request.model_dump())

    async def send_user_locked_mail(self, org_admins: Iterable[User], user_full_name: str,
                                    user_email: Optional[str]) -> bool:
        request = LockUserRequest(
            org_admins=[
                UserEmailRequest(email=admin.email, first_name=admin.first_name, last_name=admin.last_name)
                for admin in org_admins
            ],
            user_full_name=user_full_name,
            user_email=user_email,
        )
        return await self._send("v1/senduserlockedmail", request.model_dump())

    async def _send(self, endpoint: str, payload: Any) -> bool:
        try:
            await self.client.post(endpoint, data=payload)
        except ExternalServiceError as e:
            if "status_code" not in e.details:
                raise
            logger.warning(f"Email service rejected {endpoint}: {e.details['status_code']}")
            return False
        return True
