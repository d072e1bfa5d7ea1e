"""
Async client for the license service.

Assigns and releases user licenses and reads account license
details, summaries and types over the service's v2 HTTP routes.
"""

from .api import LicenseApi
from .exceptions import (
    FailedToConnectToLicenseServiceException,
    LicenseApiException,
    LicenseApiHttpError,
    LicenseManagerError,
)
from .models import (
    BulkLicenseDto,
    LicenseDto,
    LicenseResponse,
    LicenseResponseResultCode,
    LicenseSummaryDto,
    LicenseType,
    ResultCode,
    ServiceResult,
    UserLicenseDto,
    UserLicenseResponse,
    UserLicenseResponseResultCode,
)

__all__ = [
    "LicenseApi",
    "LicenseManagerError",
    "LicenseApiException",
    "LicenseApiHttpError",
    "FailedToConnectToLicenseServiceException",
    "BulkLicenseDto",
    "LicenseDto",
    "LicenseResponse",
    "LicenseResponseResultCode",
    "LicenseSummaryDto",
    "LicenseType",
    "ResultCode",
    "ServiceResult",
    "UserLicenseDto",
    "UserLicenseResponse",
    "UserLicenseResponseResultCode",
]
