# 📄 File: app/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The toolbox shared by every part of the service: settings, errors, logging, events,
# storage and HTTP clients.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package. Subpackages: config, core, events, infrastructure, utils.
#
# 🔗 Dependencies:
# None (package initialization)
#
# 🔄 Connected Modules / Calls From:
# - All application modules importing shared utilities

"""
Shared Kernel - Common Utilities and Infrastructure

- config: pydantic-settings based configuration
- core: exception hierarchy
- events: domain events and publishers
- infrastructure: document repositories, SQL store, microservice HTTP client
- utils: logging and validation primitives
"""

__all__ = []
