# 📄 File: app/modules/principal/__init__.py
# 🧭 Purpose (Layman Explanation):
# The principal module: everything about who (users, invited users, groups) and what
# (machines) belongs to a tenant.
# 🧪 Purpose (Technical Summary):
# Package initialization for the principal bounded context, laid out as domain,
# infrastructure and presentation layers.
# 🔗 Dependencies:
# domain, infrastructure and presentation subpackages
# 🔄 Connected Modules / Calls From:
# app.main, app.api.v1.router

"""
Principal Module

Domain:
- User, UserInvite, Group and Machine documents
- Invite classification and the user, invite, group and machine workflows

Infrastructure:
- Email and Tenant microservice clients

Presentation:
- /v1 routers and request/response schemas
"""

__version__ = "1.0.0"
__module_name__ = "principal"
__description__ = "Users, invites, groups and machines of a tenant"

__all__ = [
    "__version__",
    "__module_name__",
    "__description__",
]
