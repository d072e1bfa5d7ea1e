# 📄 File: app/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups version 1 of the web API.
# 🧪 Purpose (Technical Summary):
# Route prefixes and OpenAPI tags for the v1 module routers.
# 🔗 Dependencies:
# None
# 🔄 Connected Modules / Calls From:
# app.api.v1.router

API_V1_PREFIX = "/v1"

ROUTE_PREFIXES = {
    "users": "/users",
    "user_invites": "/userinvites",
    "groups": "/groups",
    "machines": "/machines",
}

API_TAGS = {
    "users": "Users",
    "user_invites": "User Invites",
    "groups": "Groups",
    "machines": "Machines",
}
