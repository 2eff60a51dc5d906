"""
VetSpark - Veterinary Clinic Triage & Reminder Coordinator

Main FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from .config import get_settings
from .database import ClinicStore
from .exceptions import ClinicError
from .logging_config import configure_logging
from .seed import seed_demo_data
from .services.coordinator import ClinicCoordinator
from .routers import (
    pets_router,
    reminders_router,
    queue_router,
    notifications_router
)

settings = get_settings()
logger = structlog.get_logger(__name__)


def create_app(coordinator: Optional[ClinicCoordinator] = None) -> FastAPI:
    """Build the application.

    A coordinator passed in is used as is; otherwise one is created per
    application lifespan, with its own store. The coordinator's settings
    drive logging, seeding and the reported name and version.
    """
    app_settings = coordinator.settings if coordinator is not None else settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        # Startup
        configure_logging(app_settings)
        logger.info("app_starting", name=app_settings.APP_NAME, version=app_settings.APP_VERSION)

        if coordinator is not None:
            app.state.coordinator = coordinator
        else:
            store = ClinicStore().open()
            app.state.coordinator = ClinicCoordinator(store=store, settings=app_settings)
            if app_settings.SEED_DEMO_DATA:
                seed_demo_data(app.state.coordinator)

        yield

        # Shutdown
        app.state.coordinator.store.close()
        logger.info("app_shutdown_complete")

    app = FastAPI(
        title=app_settings.APP_NAME,
        version=app_settings.APP_VERSION,
        lifespan=lifespan
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Trace Middleware
    @app.middleware("http")
    async def trace_middleware(request: Request, call_next):
        response = await call_next(request)
        logger.debug(
            "request_handled",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
        )
        return response

    @app.exception_handler(ClinicError)
    async def clinic_error_handler(request: Request, exc: ClinicError):
        logger.info(
            "request_rejected",
            method=request.method,
            path=request.url.path,
            error=type(exc).__name__,
            detail=exc.message,
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message, "error": type(exc).__name__}
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail}
        )

    # Global error handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("request_failed", method=request.method, path=request.url.path)
        return JSONResponse(
            status_code=500,
            content={"detail": str(exc)}
        )

    # Include routers
    app.include_router(pets_router)
    app.include_router(reminders_router)
    app.include_router(queue_router)
    app.include_router(notifications_router)

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint - health check."""
        return {
            "name": app_settings.APP_NAME,
            "version": app_settings.APP_VERSION,
            "status": "healthy",
            "docs": "/docs"
        }

    @app.get("/health", tags=["Health"])
    def health_check(request: Request):
        """Detailed health check."""
        store = request.app.state.coordinator.store
        return {
            "status": "healthy",
            "session": "open" if store.is_open else "closed",
            "collections": store.counts(),
            "version": app_settings.APP_VERSION
        }

    return app


app = create_app()


# Entry point for running directly
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "vetspark.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
