# 📄 File: app/modules/principal/presentation/__init__.py
# 🧭 Purpose (Layman Explanation):
# The web-facing part of the principal module: endpoints and the data shapes they use.
# 🧪 Purpose (Technical Summary):
# Presentation layer: FastAPI routers, Pydantic schemas and the composition root.
# 🔗 Dependencies:
# FastAPI, api.v1 routers, dependencies
# 🔄 Connected Modules / Calls From:
# app.main, app.api.v1.router
