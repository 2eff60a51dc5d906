"""
Notification feed service.
"""

from datetime import datetime
from typing import List, Optional

import structlog

from ..database import ClinicStore
from ..exceptions import NotFoundError
from ..models.notification import Notification, NotificationClass

logger = structlog.get_logger(__name__)


class NotificationFeed:
    """Newest-first event log with read/unread state.

    Entries are never removed. The caller is expected to hold ``store.lock``.
    """

    def __init__(self, store: ClinicStore):
        self.store = store
        self.logger = logger.bind(component="notification_feed")

    def emit(
        self,
        notification_id: str,
        timestamp: datetime,
        title: str,
        message: str,
        type: NotificationClass = NotificationClass.INFO,
        action_label: Optional[str] = None,
        action_link: Optional[str] = None,
        read: bool = False,
    ) -> Notification:
        """Prepend a new entry to the feed."""
        notification = Notification(
            id=notification_id,
            timestamp=timestamp,
            title=title,
            message=message,
            type=type,
            action_label=action_label,
            action_link=action_link,
            read=read,
        )
        self.store.notifications.insert(0, notification)
        self.logger.info(
            "notification_emitted",
            notification_id=notification_id,
            title=title,
            type=notification.type.value,
        )
        return notification.model_copy(deep=True)

    def mark_read(self, notification_id: str) -> Notification:
        """Mark one entry read. Already-read entries are left as they are."""
        for notification in self.store.notifications:
            if notification.id == notification_id:
                notification.read = True
                return notification.model_copy(deep=True)
        raise NotFoundError("Notification", notification_id)

    def mark_all_read(self) -> int:
        """Mark every entry read; returns how many changed."""
        changed = 0
        for notification in self.store.notifications:
            if not notification.read:
                notification.read = True
                changed += 1
        return changed

    def unread_count(self) -> int:
        return sum(1 for n in self.store.notifications if not n.read)

    def snapshot(self, limit: Optional[int] = None, unread_only: bool = False) -> List[Notification]:
        """Feed entries, newest first."""
        items = [n for n in self.store.notifications if not (unread_only and n.read)]
        if limit is not None:
            items = items[:limit]
        return [n.model_copy(deep=True) for n in items]
