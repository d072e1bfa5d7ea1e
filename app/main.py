# 📄 File: app/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts the Principal Service, connects storage and the
# sibling services, and makes sure everything is ready to handle requests.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point with logging setup, lifespan-managed
# composition root, request logging middleware, router registration and exception
# handlers mapping PrincipalServiceException to JSON.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - app.shared.config.settings
# - app.shared.utils.logging
# - app.modules.principal.presentation.dependencies (PrincipalContainer)
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - Docker container entry point
# - tests (create_application)

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from app.api import DEFAULT_HEADERS
from app.api.middleware.logging import RequestLoggingMiddleware
from app.api.v1 import API_V1_PREFIX
from app.api.v1.health import health_router
from app.api.v1.router import api_v1_router
from app.modules.principal.presentation.dependencies import PrincipalContainer
from app.shared.config.settings import get_settings
from app.shared.core.exceptions import PrincipalServiceException, is_client_error
from app.shared.utils.logging import log_shutdown_event, log_startup_event, setup_logging

settings = get_settings()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Builds the principal container unless one was installed beforehand
    (tests do this), initializes storage, and releases HTTP sessions and
    the database engine on shutdown.
    """
    setup_logging()
    logger.info("🚀 Principal Service starting up...")

    container: Optional[PrincipalContainer] = getattr(app.state, "principal", None)
    if container is None:
        container = PrincipalContainer(settings)
        app.state.principal = container

    try:
        await container.startup()
        log_startup_event(settings.APP_NAME, settings.APP_VERSION, {"environment": settings.ENVIRONMENT})
        yield
    except Exception as e:
        logger.error(f"❌ Startup failed: {e}")
        raise
    finally:
        logger.info("🔄 Principal Service shutting down...")
        try:
            await container.shutdown()
            log_shutdown_event(settings.APP_NAME)
        except Exception as e:
            logger.error(f"❌ Shutdown error: {e}")


def create_application(container: Optional[PrincipalContainer] = None) -> FastAPI:
    """
    Application factory function.

    Args:
        container: Pre-built composition root; built at startup when omitted

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )
    if container is not None:
        app.state.principal = container

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    if not settings.is_testing:
        app.add_middleware(RequestLoggingMiddleware)

    @app.middleware("http")
    async def version_headers_middleware(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers.update(DEFAULT_HEADERS)
        return response

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(health_router)
    app.include_router(api_v1_router, prefix=API_V1_PREFIX)

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    @app.exception_handler(PrincipalServiceException)
    async def principal_service_exception_handler(
        request: Request,
        exc: PrincipalServiceException
    ) -> JSONResponse:
        """Handle custom Principal Service exceptions."""
        if is_client_error(exc):
            logger.warning(f"{exc.error_code}: {exc.message}")
        else:
            logger.error(f"{exc.error_code}: {exc.message}")
        content = exc.to_dict()
        content["error"]["timestamp"] = datetime.now(timezone.utc).isoformat()
        content["error"]["request_id"] = getattr(request.state, "request_id", None)
        return JSONResponse(status_code=exc.status_code, content=content)

    @app.exception_handler(Exception)
    async def internal_server_error_handler(
        request: Request,
        exc: Exception
    ) -> JSONResponse:
        """Handle unexpected errors."""
        logger.error(f"Internal server error: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_SERVER_ERROR",
                    "message": "An internal server error occurred",
                    "details": {"error_type": type(exc).__name__} if settings.DEBUG else {},
                    "request_id": getattr(request.state, "request_id", None),
                }
            },
        )

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "description": settings.APP_DESCRIPTION,
            "health_check": "/health",
            "api_base": API_V1_PREFIX,
        }

    return app


app = create_application()


def main():
    """
    Main function for running the application in development.

    Used when running the application directly with python -m app.main.
    """
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
