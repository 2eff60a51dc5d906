"""Routers package for VetSpark API."""

from .pets import router as pets_router
from .reminders import router as reminders_router
from .queue import router as queue_router
from .notifications import router as notifications_router

__all__ = [
    "pets_router",
    "reminders_router",
    "queue_router",
    "notifications_router"
]
