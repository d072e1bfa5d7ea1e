# 📄 File: app/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Marks the api folder as a package holding the versioned web routes and the request
# middleware shared by every module.
# 🧪 Purpose (Technical Summary):
# Package initialization for the API layer: version constants shared by the router and
# middleware.
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# app.main.py, app.api.v1.router, app.api.middleware

"""
Principal Service API Package

Structure:
    api/
    ├── __init__.py          # This file
    ├── middleware/
    │   └── logging.py       # Request logging and correlation ids
    └── v1/
        ├── router.py        # Main v1 router
        └── health.py        # Health check endpoints
"""

__version__ = "1.0.0"
__description__ = "Principal Service REST API"

CURRENT_VERSION = "v1"
SUPPORTED_VERSIONS = ["v1"]

DEFAULT_HEADERS = {
    "X-API-Version": CURRENT_VERSION,
    "X-Service": "principal-service",
}
