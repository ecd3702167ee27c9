from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from sqlalchemy import text

from app.api.exception_handlers import register_exception_handlers
from app.api.routes import (
    admin_router,
    auth_router,
    health_router,
    messages_router,
    notifications_router,
    payments_router,
    projects_router,
    proposals_router,
    reviews_router,
    time_entries_router,
    users_router,
)
from app.config.logging_config import configure_logging
from app.config.settings import settings
from app.db.base import close_db, get_session_factory, init_db


configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    logger.info(f"Starting {settings.APP_NAME}...")

    if settings.DB_CREATE_ALL:
        await init_db()

    # Check database connectivity
    try:
        async with get_session_factory()() as session:
            await session.execute(text("SELECT 1"))
        logger.info("Database connection: OK")
    except Exception as e:
        logger.error(f"Database connection: FAILED - {str(e)}")

    yield
    logger.info(f"Shutting down {settings.APP_NAME}...")
    await close_db()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="REST API for a freelance marketplace: projects, proposals, time tracking and notifications.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
register_exception_handlers(app)

# Register routers
app.include_router(health_router)
app.include_router(auth_router, prefix="/api/v1")
app.include_router(users_router, prefix="/api/v1")
app.include_router(projects_router, prefix="/api/v1")
app.include_router(proposals_router, prefix="/api/v1")
app.include_router(time_entries_router, prefix="/api/v1")
app.include_router(notifications_router, prefix="/api/v1")
app.include_router(reviews_router, prefix="/api/v1")
app.include_router(messages_router, prefix="/api/v1")
app.include_router(payments_router, prefix="/api/v1")
app.include_router(admin_router, prefix="/api/v1")
