# 📄 File: app/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The main configuration center that reads all settings from environment variables
# and hands them to the Principal Service (database, sibling services, email rules).
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading,
# validation, and type safety for all application configuration parameters.
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - typing for type hints
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - app.shared.infrastructure.database (document store engine)
# - app.modules.principal.infrastructure.external (sibling service clients)
# - app.modules.principal.domain.services (free email domains, on-prem tenants)

from functools import lru_cache
from typing import List, Optional
from uuid import UUID

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety. Settings are loaded
    from environment variables with fallback to .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================

    APP_NAME: str = Field(default="Principal Service", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    APP_DESCRIPTION: str = Field(
        default="Users, groups, machines and user invitations for tenants",
        description="Application description"
    )
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=False, description="Debug mode flag")

    # =========================================================================
    # LOGGING
    # =========================================================================

    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log output format: json or text")
    LOG_FILE: Optional[str] = Field(None, description="Optional log file path")

    # =========================================================================
    # SERVER CONFIGURATION
    # =========================================================================

    HOST: str = Field(default="0.0.0.0", description="Server host")
    PORT: int = Field(default=8000, description="Server port")

    # =========================================================================
    # DATABASE CONFIGURATION
    # =========================================================================

    DATABASE_URL: Optional[str] = Field(
        None,
        description="SQLAlchemy async URL; the in-memory store is used when unset"
    )
    DB_ECHO: bool = Field(default=False, description="Echo SQL statements")

    # =========================================================================
    # SIBLING SERVICES
    # =========================================================================

    LICENSE_SERVICE_URL: str = Field(
        default="http://localhost:8081",
        description="License service base URL"
    )
    LICENSE_SERVICE_TOKEN: Optional[str] = Field(
        None,
        description="Bearer token sent to the license service"
    )
    EMAIL_SERVICE_URL: str = Field(
        default="http://localhost:8082",
        description="Email service base URL"
    )
    TENANT_SERVICE_URL: str = Field(
        default="http://localhost:8083",
        description="Tenant service base URL"
    )
    HTTP_TIMEOUT_SECONDS: int = Field(default=30, description="Outbound HTTP timeout")
    HTTP_MAX_RETRIES: int = Field(default=3, description="Outbound HTTP retry attempts")

    # =========================================================================
    # PRINCIPAL RULES
    # =========================================================================

    FREE_EMAIL_DOMAINS: str = Field(
        default="aol.com,gmail.com,hotmail.com",
        description="Comma separated free email hosts rejected for invites"
    )
    ON_PREM_DEPLOYMENT: bool = Field(
        default=False,
        description="Reject user creation under the built-in provisioning tenants"
    )
    BUILT_IN_ON_PREM_TENANT_IDS: str = Field(
        default="2D907264-8797-4666-A8BB-72FE98733385,DBAE315B-6ABF-4A8B-886E-C9CC0E1D16B3",
        description="Comma separated provisioning tenant ids"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed_environments = ["development", "staging", "production", "test"]
        if v.lower() not in allowed_environments:
            raise ValueError(f"Environment must be one of {allowed_environments}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed_levels:
            raise ValueError(f"Log level must be one of {allowed_levels}")
        return v.upper()

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v.lower() not in ("json", "text"):
            raise ValueError("Log format must be 'json' or 'text'")
        return v.lower()

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================

    @property
    def free_email_domains(self) -> List[str]:
        """Get free email domains as a lower-cased list."""
        return [
            domain.strip().lower()
            for domain in self.FREE_EMAIL_DOMAINS.split(",")
            if domain.strip()
        ]

    @property
    def built_in_on_prem_tenant_ids(self) -> List[UUID]:
        """Get the provisioning tenant ids as UUIDs."""
        return [
            UUID(tenant_id.strip())
            for tenant_id in self.BUILT_IN_ON_PREM_TENANT_IDS.split(",")
            if tenant_id.strip()
        ]

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT == "production"

    @property
    def is_testing(self) -> bool:
        """Check if running in test environment."""
        return self.ENVIRONMENT == "test"


# ============================================================================
# SETTINGS FACTORY
# ============================================================================

@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Uses lru_cache to ensure settings are loaded only once
    and reused throughout the application lifecycle.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
