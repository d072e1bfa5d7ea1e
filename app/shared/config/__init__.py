# 📄 File: app/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings that tell the service where its database and sibling services
# live and how it should behave.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization exporting the Settings class and its cached factory.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - All modules requiring configuration
# - Infrastructure components

"""
Configuration Management Package

Handles all application configuration including:
- Environment-based settings
- Document database connection
- License, Email and Tenant service endpoints
- Invite domain and on-prem tenant rules
"""

from .settings import get_settings, Settings

__all__ = [
    "get_settings", 
    "Settings",
]