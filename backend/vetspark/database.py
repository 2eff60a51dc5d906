"""
In-memory clinic store.
Holds the reminder, appointment and notification collections for one session.
"""

import threading
from typing import Dict, List

import structlog

from .models.reminder import Reminder
from .models.queue import Appointment
from .models.notification import Notification

logger = structlog.get_logger(__name__)


class ClinicStore:
    """Collections owned by a single clinic session.

    Every read and write goes through ``lock``; the coordinator holds it for
    the full duration of a mutation and its notification.
    """

    def __init__(self):
        self.lock = threading.RLock()
        self.reminders: Dict[str, Reminder] = {}
        self.appointments: List[Appointment] = []  # severity desc, date asc
        self.notifications: List[Notification] = []  # newest first
        self.is_open = False

    def open(self) -> "ClinicStore":
        """Start a clinic session."""
        self.is_open = True
        logger.info("clinic_session_opened")
        return self

    def close(self) -> None:
        """End the clinic session."""
        if self.is_open:
            self.is_open = False
            logger.info("clinic_session_closed", **self.counts())

    def counts(self) -> Dict[str, int]:
        """Size of each collection."""
        with self.lock:
            return {
                "reminders": len(self.reminders),
                "appointments": len(self.appointments),
                "notifications": len(self.notifications),
            }
