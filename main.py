# main.py
"""
Rasoi API - Main Application.

FastAPI app with MongoDB backend: Claude proxy plus per-user persistence
of pantry, meal plans, shopping lists and weekly menus.
"""

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from typing import Optional
import logging

from pymongo.errors import PyMongoError
import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

from database import Database, get_database
from settings import Settings, settings
from app.middleware.body_limit import BodyLimitMiddleware
from app.routes import admin, claude, menu, profile
from app.utils.errors import RasoiException

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Initialize Sentry for error tracking
if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.SENTRY_ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        integrations=[
            FastApiIntegration(),
            LoggingIntegration(
                level=logging.INFO,
                event_level=logging.ERROR
            ),
        ],
    )
    logger.info(f"Sentry initialized ({settings.SENTRY_ENVIRONMENT})")
else:
    logger.warning("Sentry DSN not configured - error tracking disabled")


async def rasoi_exception_handler(request: Request, exc: RasoiException) -> JSONResponse:
    """Render application errors as {"error": message}."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def store_exception_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    """Pass MongoDB driver errors through as 500s."""
    logger.error(f"{request.method} {request.url.path} store error: {exc}")
    return JSONResponse(status_code=500, content={"error": str(exc)})


def _degraded(error: str) -> dict:
    return {"status": "Rasoi proxy ✓", "storage": "MongoDB disconnected", "error": error}


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Settings to configure middleware with (defaults to env).

    Returns:
        FastAPI: Configured application.
    """
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events."""
        # MongoDB connects lazily on the first request that needs it
        logger.info("Starting Rasoi API...")
        yield

        database = await get_database()
        await database.close()
        logger.info("Rasoi API shutdown complete")

    app = FastAPI(
        title="Rasoi API",
        version="1.0.0",
        description="Claude proxy and MongoDB storage for the Rasoi meal planner",
        lifespan=lifespan
    )

    # Added first so CORS wraps its 413 responses
    app.add_middleware(BodyLimitMiddleware, max_body_bytes=app_settings.MAX_BODY_BYTES)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.get_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RasoiException, rasoi_exception_handler)
    app.add_exception_handler(PyMongoError, store_exception_handler)

    @app.get("/")
    async def health_check(database: Database = Depends(get_database)):
        """Health check with MongoDB connectivity test."""
        try:
            await database.get_connection()
        except (RasoiException, PyMongoError) as e:
            return _degraded(str(e))

        if not await database.ping():
            return _degraded("MongoDB ping failed")
        return {"status": "Rasoi proxy ✓", "storage": "MongoDB"}

    # Include routers
    app.include_router(claude.router, prefix="/api", tags=["Claude"])
    app.include_router(profile.router, prefix="/api", tags=["Profile"])
    app.include_router(menu.router, prefix="/api/menu", tags=["Menu"])
    app.include_router(admin.router, prefix="/api/admin", tags=["Admin"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Rasoi proxy + MongoDB on port {settings.PORT}")
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
