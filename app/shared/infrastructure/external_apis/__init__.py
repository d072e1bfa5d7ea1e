# 📄 File: app/shared/infrastructure/external_apis/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The way the service talks to its sibling services over HTTP.
#
# 🧪 Purpose (Technical Summary):
# External API infrastructure exporting ServiceClient (aiohttp with tenacity retries).
#
# 🔗 Dependencies:
# - api_client.py
#
# 🔄 Connected Modules / Calls From:
# - principal EmailApi and TenantApi, presentation wiring

from .api_client import ServiceClient

__all__ = ["ServiceClient"]
