# 📄 File: license_manager/exceptions.py
# 🧭 Purpose (Layman Explanation):
# The error types the license client raises when the license service says "no",
# cannot be reached, or answers with an HTTP error.
# 🧪 Purpose (Technical Summary):
# Exception hierarchy for the license client. LicenseApiException carries the envelope
# ResultCode and the service's client-facing message.
# 🔗 Dependencies:
# license_manager.models (ResultCode)
# 🔄 Connected Modules / Calls From:
# license_manager.api, app.modules.principal.domain.services.user_service

from typing import Optional

from .models import ResultCode


class LicenseManagerError(Exception):
    """Base class for license client errors."""


class LicenseApiException(LicenseManagerError):
    """
    The license service answered, but not with ResultCode.SUCCESS
    (or rejected the caller with HTTP 401).
    """

    def __init__(self, message: str, client_message: Optional[str], result_code: ResultCode):
        super().__init__(message)
        self.client_message = client_message
        self.result_code = result_code


class LicenseApiHttpError(LicenseManagerError):
    """Non-success HTTP status other than 401."""

    def __init__(self, message: str, status: int, route: str):
        super().__init__(message)
        self.status = status
        self.route = route


class FailedToConnectToLicenseServiceException(LicenseManagerError):
    """The license service could not be reached."""

    def __init__(self, message: str = "Failed to connect to the license service"):
        super().__init__(message)
