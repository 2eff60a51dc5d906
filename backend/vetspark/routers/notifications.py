"""
Notification feed API routes.
"""

from typing import Optional
from fastapi import APIRouter, status, Depends, Query

from ..models.notification import Notification, NotificationCreate, NotificationFeedDisplay
from ..services.coordinator import ClinicCoordinator
from .dependencies import get_coordinator

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("", response_model=NotificationFeedDisplay)
def get_feed(
    limit: Optional[int] = Query(None, ge=1, le=500),
    unread_only: bool = Query(False),
    coordinator: ClinicCoordinator = Depends(get_coordinator)
):
    """Notification feed, newest first."""
    return coordinator.feed_display(limit=limit, unread_only=unread_only)


@router.post("", response_model=Notification, status_code=status.HTTP_201_CREATED)
def record_event(
    event: NotificationCreate,
    coordinator: ClinicCoordinator = Depends(get_coordinator)
):
    """Add an event to the feed."""
    return coordinator.record_event(event)


@router.post("/read-all")
def mark_all_read(coordinator: ClinicCoordinator = Depends(get_coordinator)):
    """Mark every notification as read."""
    changed = coordinator.mark_all_read()
    return {"marked_read": changed, "unread_count": coordinator.unread_count()}


@router.post("/{notification_id}/read", response_model=Notification)
def mark_read(
    notification_id: str,
    coordinator: ClinicCoordinator = Depends(get_coordinator)
):
    """Mark one notification as read."""
    return coordinator.mark_read(notification_id)
