"""Routers package for the PetHub API."""

from .auth import router as auth_router
from .users import router as users_router
from .pets import router as pets_router
from .tasks import router as tasks_router
from .medical_records import router as medical_records_router
from .posts import router as posts_router
from .comments import router as comments_router, reply_router as replies_router
from .shops import router as shops_router
from .notifications import router as notifications_router
from .admin import router as admin_router

__all__ = [
    "auth_router",
    "users_router",
    "pets_router",
    "tasks_router",
    "medical_records_router",
    "posts_router",
    "comments_router",
    "replies_router",
    "shops_router",
    "notifications_router",
    "admin_router",
]
