# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the helpers that look at every request on its way in and out, like the one
# that writes each request into the log.
# 🧪 Purpose (Technical Summary):
# Package initialization for API middleware with per-middleware configuration and path
# exclusion helpers.
# 🔗 Dependencies:
# None
# 🔄 Connected Modules / Calls From:
# app.main.py, app.api.middleware.logging

from typing import Any, Dict

MIDDLEWARE_CONFIG = {
    "logging": {
        "enabled": True,
        "exclude_paths": [
            "/health",
            "/docs",
            "/redoc",
            "/openapi.json",
        ],
    },
}


def get_middleware_config(middleware_name: str) -> Dict[str, Any]:
    return MIDDLEWARE_CONFIG.get(middleware_name, {})


def should_exclude_path(middleware_name: str, path: str) -> bool:
    """
    Check if a path should be excluded from middleware processing

    Args:
        middleware_name: Name of the middleware
        path: Request path to check

    Returns:
        True if path should be excluded, False otherwise
    """
    config = get_middleware_config(middleware_name)
    for exclude_path in config.get("exclude_paths", []):
        if path == exclude_path or path.startswith(exclude_path + "/"):
            return True
    return False


__all__ = ["MIDDLEWARE_CONFIG", "get_middleware_config", "should_exclude_path"]
