# 📄 File: app/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# Sets up how the service writes its diary: every line says when something happened,
# which request and tenant it belonged to, and any extra facts worth keeping.

# 🧪 Purpose (Technical Summary):
# Structured logging with python-json-logger output, request/tenant correlation through
# context variables, a StructuredLogger wrapper accepting extra fields, and a context
# manager binding correlation data for the duration of a request.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Request context tracking

# 🔄 Connected Modules / Calls From:
# Used by: app.main (startup and request middleware), domain services, repositories,
# external API clients, event publishers

import logging
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

from app.shared.config.settings import get_settings

# Context variables for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')
tenant_id_var: ContextVar[str] = ContextVar('tenant_id', default='')
user_id_var: ContextVar[str] = ContextVar('user_id', default='')

SERVICE_NAME = 'principal-service'

_logging_configured = False
_loggers_cache: Dict[str, "StructuredLogger"] = {}


def _apply_context(record: logging.LogRecord) -> None:
    record.request_id = request_id_var.get('')
    record.tenant_id = tenant_id_var.get('')
    record.user_id = user_id_var.get('')
    if hasattr(record, 'extra_fields') and record.extra_fields:
        for key, value in record.extra_fields.items():
            setattr(record, key, value)


class ContextualFormatter(logging.Formatter):
    """
    Plain-text formatter that adds request, tenant and user ids to each record.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.hostname = os.uname().nodename if hasattr(os, 'uname') else 'unknown'

    def format(self, record):
        _apply_context(record)
        record.hostname = self.hostname
        record.service = SERVICE_NAME
        record.timestamp = datetime.now(timezone.utc).isoformat()
        return super().format(record)


class ServiceJsonFormatter(JsonFormatter):
    """
    JSON formatter for log aggregation.

    Emits one object per record with the service name, host and any
    correlation ids bound through log_context().
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('timestamp', True)
        super().__init__(
            '%(levelname)s %(name)s %(message)s %(module)s %(funcName)s %(lineno)d',
            *args,
            **kwargs,
        )
        self.hostname = os.uname().nodename if hasattr(os, 'uname') else 'unknown'

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record['service'] = SERVICE_NAME
        log_record['hostname'] = self.hostname
        for key, var in (('request_id', request_id_var), ('tenant_id', tenant_id_var), ('user_id', user_id_var)):
            value = var.get('')
            if value:
                log_record[key] = value
        # extra_fields are already flattened by the base class; drop the nested copy
        log_record.pop('extra_fields', None)
        if hasattr(record, 'extra_fields') and record.extra_fields:
            log_record['extra'] = record.extra_fields


class StructuredLogger:
    """
    Enhanced logger with structured logging capabilities.

    Keyword arguments other than exc_info/stack_info/stacklevel are attached
    to the record as extra fields.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def debug(self, message: str, extra: Optional[Dict] = None, **kwargs):
        self._log(logging.DEBUG, message, extra, **kwargs)

    def info(self, message: str, extra: Optional[Dict] = None, **kwargs):
        self._log(logging.INFO, message, extra, **kwargs)

    def warning(self, message: str, extra: Optional[Dict] = None, **kwargs):
        self._log(logging.WARNING, message, extra, **kwargs)

    def error(self, message: str, extra: Optional[Dict] = None, exc_info: bool = False, **kwargs):
        self._log(logging.ERROR, message, extra, exc_info=exc_info, **kwargs)

    def exception(self, message: str, extra: Optional[Dict] = None, **kwargs):
        self._log(logging.ERROR, message, extra, exc_info=True, **kwargs)

    def log(self, level: int, message: str, extra: Optional[Dict] = None, **kwargs):
        self._log(level, message, extra, **kwargs)

    def _log(self, level: int, message: str, extra: Optional[Dict] = None, **kwargs):
        """Internal log method with extra fields handling."""
        extra_fields = dict(extra or {})

        for key, value in kwargs.items():
            if key not in ['exc_info', 'stack_info', 'stacklevel']:
                extra_fields[key] = value

        clean_kwargs = {k: v for k, v in kwargs.items()
                        if k in ['exc_info', 'stack_info', 'stacklevel']}

        if extra_fields:
            clean_kwargs['extra'] = {'extra_fields': extra_fields}

        self.logger.log(level, message, **clean_kwargs)


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    log_file: Optional[str] = None,
    enable_console: bool = True
) -> logging.Logger:
    """
    Setup application logging configuration.

    Arguments left as None fall back to LOG_LEVEL, LOG_FORMAT and LOG_FILE
    from settings. Calling it twice is a no-op.

    Returns:
        The "startup" logger.
    """
    global _logging_configured

    if _logging_configured:
        return logging.getLogger("startup")

    settings = get_settings()
    log_level = log_level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT
    log_file = log_file or settings.LOG_FILE

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format.lower() == 'json':
        formatter: logging.Formatter = ServiceJsonFormatter()
    else:
        formatter = ContextualFormatter(
            '%(timestamp)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s'
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger('aiohttp').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.WARNING)
    logging.getLogger('sqlalchemy.engine').setLevel(
        logging.INFO if settings.DB_ECHO else logging.WARNING
    )

    _logging_configured = True
    return logging.getLogger("startup")


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        StructuredLogger instance
    """
    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = StructuredLogger(name)
    _loggers_cache[name] = logger

    return logger


@contextmanager
def log_context(
    request_id: Optional[str] = None,
    tenant_id: Optional[str] = None,
    user_id: Optional[str] = None
):
    """
    Context manager for adding contextual information to logs.

    Args:
        request_id: Request identifier (generated when omitted)
        tenant_id: Tenant the request acts on
        user_id: Acting user
    """
    if request_id is None:
        request_id = str(uuid4())

    request_token = request_id_var.set(request_id)
    tenant_token = tenant_id_var.set(str(tenant_id) if tenant_id else '')
    user_token = user_id_var.set(str(user_id) if user_id else '')

    try:
        yield {
            'request_id': request_id,
            'tenant_id': tenant_id,
            'user_id': user_id
        }
    finally:
        request_id_var.reset(request_token)
        tenant_id_var.reset(tenant_token)
        user_id_var.reset(user_token)


def log_startup_event(service_name: str, version: str, extra: Optional[Dict] = None):
    """Log application startup event."""
    logger = get_logger('startup')
    logger.info(
        f"Service {service_name} starting up",
        extra={
            'event_type': 'service_startup',
            'service_name': service_name,
            'version': version,
            **(extra or {})
        }
    )


def log_shutdown_event(service_name: str, extra: Optional[Dict] = None):
    """Log application shutdown event."""
    logger = get_logger('shutdown')
    logger.info(
        f"Service {service_name} shutting down",
        extra={
            'event_type': 'service_shutdown',
            'service_name': service_name,
            **(extra or {})
        }
    )
