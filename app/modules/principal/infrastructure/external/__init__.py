from .email_api import EmailApi, LockUserRequest, UserEmailRequest
from .tenant_api import TenantApi

__all__ = ["EmailApi", "LockUserRequest", "TenantApi", "UserEmailRequest"]
