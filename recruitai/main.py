"""
RecruitAI - Main FastAPI Application
"""

import logging
import sys
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recruitai.api import create_api_router
from recruitai.core.config import Settings, get_settings
from recruitai.database import get_sqlmodel_db_manager, init_sqlmodel_database, shutdown_sqlmodel_database
from recruitai.infrastructure.providers.ai_provider import get_openai_service, reset_ai_services
from recruitai.infrastructure.providers.notification_provider import reset_notification_service
from recruitai.infrastructure.providers.repository_provider import reset_repositories

logger = structlog.get_logger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure structured logging"""
    if settings.LOG_FORMAT == "json":
        renderer = structlog.processors.JSONRenderer()
    elif settings.LOG_FORMAT == "console" and sys.stdout.isatty():
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.LOG_LEVEL.upper())
        ),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    settings = get_settings()
    logger.info("Starting RecruitAI API", version=app.version, environment=settings.ENVIRONMENT)

    try:
        await init_sqlmodel_database(settings)
        if settings.is_local():
            await get_sqlmodel_db_manager().create_tables()
    except Exception as e:
        logger.error("Failed to initialize database", error=str(e))
        if settings.is_production():
            sys.exit(1)

    try:
        ai_service = await get_openai_service()
        logger.info("AI analysis", enabled=ai_service is not None, model=settings.OPENAI_MODEL)
    except Exception as e:
        logger.error("Failed to initialize AI service, falling back to basic analysis", error=str(e))

    yield

    logger.info("Shutting down RecruitAI API")
    try:
        await shutdown_sqlmodel_database()
        await reset_ai_services()
        await reset_notification_service()
        await reset_repositories()
        logger.info("Service cleanup completed")
    except Exception as e:
        logger.error("Cleanup error", error=str(e))


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="Multi-tenant applicant tracking with AI-assisted matching and candidate interviews",
        version=settings.APP_VERSION,
        docs_url="/docs" if not settings.is_production() else None,
        redoc_url="/redoc" if not settings.is_production() else None,
        openapi_url="/openapi.json" if not settings.is_production() else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(create_api_router())

    @app.get("/health")
    async def health_check():
        """Basic health check endpoint"""
        return {
            "status": "healthy",
            "version": app.version,
            "environment": settings.ENVIRONMENT,
        }

    @app.get("/health/database")
    async def database_health_check():
        return await get_sqlmodel_db_manager().health_check()

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "recruitai.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.ENVIRONMENT == "development",
        log_config=None,  # Use our structured logging
    )
