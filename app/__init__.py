# 📄 File: app/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this 'app' folder contains the Principal Service and records its version.
#
# 🧪 Purpose (Technical Summary):
# Application package initialization with version info for the Principal Service
# FastAPI application.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - main.py (application entry point)
# - Package imports throughout the application

"""
Principal Service

Manages the users, user invitations, groups and machines of each tenant and
assigns user licenses through the License service.
"""

__version__ = "1.0.0"
__title__ = "Principal Service"
__description__ = "Multi-tenant users, invites, groups and machines"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
]
