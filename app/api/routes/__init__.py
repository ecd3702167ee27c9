"""API routes module."""

from app.api.routes.admin import router as admin_router
from app.api.routes.auth import router as auth_router
from app.api.routes.health import router as health_router
from app.api.routes.messages import router as messages_router
from app.api.routes.notifications import router as notifications_router
from app.api.routes.payments import router as payments_router
from app.api.routes.projects import router as projects_router
from app.api.routes.proposals import router as proposals_router
from app.api.routes.reviews import router as reviews_router
from app.api.routes.time_entries import router as time_entries_router
from app.api.routes.users import router as users_router

__all__ = [
    "admin_router",
    "auth_router",
    "health_router",
    "messages_router",
    "notifications_router",
    "payments_router",
    "projects_router",
    "proposals_router",
    "reviews_router",
    "time_entries_router",
    "users_router",
]
