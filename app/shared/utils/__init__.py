# 📄 File: app/shared/utils/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Small helpers used everywhere: writing logs and checking incoming data.
#
# 🧪 Purpose (Technical Summary):
# Shared utilities package re-exporting the logging setup and validation primitives.
#
# 🔗 Dependencies:
# - logging.py (python-json-logger)
# - validators.py (email-validator)
#
# 🔄 Connected Modules / Calls From:
# - app.main, domain validators, services, HTTP clients

from .logging import get_logger, log_context, setup_logging
from .validators import (
    IdValidator,
    ValidationFailure,
    ValidationResult,
    Validator,
    email_host,
    is_bulk_upload_email,
    is_valid_email_address,
    is_valid_id,
)

__all__ = [
    "get_logger",
    "log_context",
    "setup_logging",
    "IdValidator",
    "ValidationFailure",
    "ValidationResult",
    "Validator",
    "email_host",
    "is_bulk_upload_email",
    "is_valid_email_address",
    "is_valid_id",
]
