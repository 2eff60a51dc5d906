"""
Medication, vaccine and checkup reminder tracking.
"""

from datetime import datetime, timedelta
from typing import Iterable, List, Optional

import structlog

from ..clock import ensure_utc
from ..database import ClinicStore
from ..exceptions import InvalidInputError, NotFoundError
from ..models.reminder import Reminder, ReminderConfirmation

logger = structlog.get_logger(__name__)


class ReminderTracker:
    """Due dates and confirmation state of reminders.

    Operates on the store's reminder collection; the caller is expected to
    hold ``store.lock``.
    """

    def __init__(self, store: ClinicStore):
        self.store = store
        self.logger = logger.bind(component="reminder_tracker")

    def load(self, reminders: Iterable[Reminder]) -> int:
        """Import externally created reminders. Duplicate ids reject the whole batch."""
        batch = [r.model_copy(deep=True) for r in reminders]
        seen = set(self.store.reminders)
        for reminder in batch:
            if reminder.id in seen:
                raise InvalidInputError(f"Duplicate reminder id: {reminder.id}")
            seen.add(reminder.id)

        for reminder in batch:
            self.store.reminders[reminder.id] = reminder
        self.logger.info("reminders_loaded", count=len(batch))
        return len(batch)

    def get(self, reminder_id: str) -> Reminder:
        """Get reminder by ID."""
        reminder = self.store.reminders.get(reminder_id)
        if reminder is None:
            raise NotFoundError("Reminder", reminder_id)
        return reminder.model_copy(deep=True)

    def list(self, pet_id: Optional[str] = None) -> List[Reminder]:
        """Reminders ordered by due date, optionally for one pet."""
        items = [
            r for r in self.store.reminders.values()
            if pet_id is None or r.pet_id == pet_id
        ]
        return [r.model_copy(deep=True) for r in sorted(items, key=lambda r: r.due_at)]

    def confirm(self, reminder_id: str) -> ReminderConfirmation:
        """Mark a reminder as confirmed. Confirming twice changes nothing."""
        reminder = self.store.reminders.get(reminder_id)
        if reminder is None:
            raise NotFoundError("Reminder", reminder_id)

        already_confirmed = reminder.confirmed
        if not already_confirmed:
            reminder.confirmed = True
            self.logger.info("reminder_confirmed", reminder_id=reminder_id, pet_id=reminder.pet_id)

        return ReminderConfirmation(
            reminder=reminder.model_copy(deep=True),
            already_confirmed=already_confirmed,
        )

    @staticmethod
    def is_overdue(reminder: Reminder, now: datetime) -> bool:
        """True if the reminder is past due and still unconfirmed."""
        return reminder.due_at < ensure_utc(now) and not reminder.confirmed

    def overdue(self, now: datetime) -> List[Reminder]:
        """All overdue reminders, oldest first."""
        return [r for r in self.list() if self.is_overdue(r, now)]

    def due_within(self, window: timedelta, now: datetime) -> List[Reminder]:
        """Reminders due in ``[now, now + window]``, soonest first."""
        if window < timedelta(0):
            raise InvalidInputError("Reminder window must not be negative")
        start = ensure_utc(now)
        end = start + window
        return [r for r in self.list() if start <= r.due_at <= end]
