"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

from fastapi import FastAPI

from fitcoach.api.v1.router import api_router
from fitcoach.core.config import settings
from fitcoach.core.error_handlers import domain_error_handler
from fitcoach.core.exceptions import DomainError
from fitcoach.core.logging import configure_logging
from fitcoach.middleware.request_context import RequestContextMiddleware


def create_app() -> FastAPI:
    configure_logging()

    application = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Program recommendation and session scheduling for trainers and their clients.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json")

    application.add_middleware(RequestContextMiddleware)
    application.add_exception_handler(DomainError, domain_error_handler)
    application.include_router(api_router, prefix="/api/v1")
    return application


app = create_app()


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {"message": "FitCoach API", "version": settings.VERSION, "status": "healthy"}


@app.get("/health")
async def health_check():
    """Liveness check."""
    return {"status": "healthy", "service": "fitcoach-api", "version": settings.VERSION}


@app.get("/info")
async def info():
    return {
        "project name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "authors": settings.AUTHORS,
        "project url": settings.PROJECT_URL,
        "recommendation limit": settings.RECOMMENDATION_LIMIT,
        "max sessions per day": settings.MAX_SESSIONS_PER_DAY,
    }
