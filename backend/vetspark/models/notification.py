"""
Notification feed models.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from enum import Enum


class NotificationClass(str, Enum):
    """Display class of a notification."""
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class NotificationCreate(BaseModel):
    """Caller-requested feed event."""
    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., max_length=2000)
    type: NotificationClass = NotificationClass.INFO
    action_label: Optional[str] = None
    action_link: Optional[str] = None


class Notification(NotificationCreate):
    """Feed entry."""
    id: str
    timestamp: datetime
    read: bool = False


class NotificationFeedDisplay(BaseModel):
    """Feed snapshot with unread counter."""
    notifications: List[Notification] = []
    unread_count: int = 0
