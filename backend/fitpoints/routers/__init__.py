"""Routers package."""

from fitpoints.routers.habits import router as habits_router
from fitpoints.routers.points import router as points_router
from fitpoints.routers.notes import router as notes_router
from fitpoints.routers.plans import router as plans_router
from fitpoints.routers.admin import router as admin_router

__all__ = [
    "habits_router",
    "points_router",
    "notes_router",
    "plans_router",
    "admin_router",
]
