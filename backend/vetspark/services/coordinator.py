"""
Clinic coordinator: the caller-facing facade over reminders, triage and the
notification feed.

Every mutating operation runs under the store lock and emits its notification
before returning. If the mutation raises, nothing is emitted and the
collections are left as they were.
"""

from datetime import timedelta
from typing import Any, List, Mapping, Optional, Union

import structlog
from pydantic import ValidationError

from ..clock import Clock, IdGenerator, SystemClock, UUIDGenerator
from ..config import Settings, get_settings
from ..database import ClinicStore
from ..exceptions import EmptyRosterError, InvalidInputError
from ..models.notification import (
    Notification,
    NotificationClass,
    NotificationCreate,
    NotificationFeedDisplay,
)
from ..models.pet import Pet, PetCreate
from ..models.queue import (
    Appointment,
    AppointmentCreate,
    AppointmentStatus,
    QueueSummary,
    Severity,
)
from ..models.reminder import Reminder, ReminderConfirmation
from .notification_service import NotificationFeed
from .pet_service import InMemoryPetDirectory, PetRegistry
from .queue_service import TriageQueue
from .reminder_service import ReminderTracker

logger = structlog.get_logger(__name__)


def _validate(model, data):
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise InvalidInputError(str(e)) from e


def _coerce(enum, value, label: str):
    try:
        return enum(value)
    except ValueError as e:
        raise InvalidInputError(f"Unknown {label}: {value}") from e


class ClinicCoordinator:
    """Sequences state changes and their notifications for one clinic session."""

    def __init__(
        self,
        store: Optional[ClinicStore] = None,
        pets: Optional[PetRegistry] = None,
        clock: Optional[Clock] = None,
        ids: Optional[IdGenerator] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.clock = clock or SystemClock()
        self.ids = ids or UUIDGenerator()
        self.store = store or ClinicStore()
        self.pets = pets or InMemoryPetDirectory(self.ids, self.settings.PET_ID_PREFIX)

        self.reminders = ReminderTracker(self.store)
        self.queue = TriageQueue(self.store)
        self.feed = NotificationFeed(self.store)
        self.logger = logger.bind(component="coordinator")

    def _notify(
        self,
        title: str,
        message: str,
        type: NotificationClass = NotificationClass.INFO,
        action_label: Optional[str] = None,
        action_link: Optional[str] = None,
    ) -> Notification:
        return self.feed.emit(
            self.ids.new_id(self.settings.NOTIFICATION_ID_PREFIX),
            self.clock.now(),
            title,
            message,
            type,
            action_label=action_label,
            action_link=action_link,
        )

    # Reminders

    def confirm_medication(self, reminder_id: str) -> ReminderConfirmation:
        """Confirm a reminder; only the first confirmation is announced."""
        with self.store.lock:
            result = self.reminders.confirm(reminder_id)
            if not result.already_confirmed:
                self._notify(
                    "Medication Confirmed",
                    "Great job keeping up with the schedule!",
                    NotificationClass.SUCCESS,
                )
            return result

    def import_reminders(self, reminders: List[Union[Reminder, Mapping[str, Any]]]) -> int:
        with self.store.lock:
            return self.reminders.load([_validate(Reminder, r) for r in reminders])

    def list_reminders(self, pet_id: Optional[str] = None) -> List[Reminder]:
        with self.store.lock:
            return self.reminders.list(pet_id)

    def due_within(self, window: Optional[timedelta] = None) -> List[Reminder]:
        """Reminders coming due in the window (defaults to REMINDER_WINDOW_HOURS)."""
        if window is None:
            window = timedelta(hours=self.settings.REMINDER_WINDOW_HOURS)
        with self.store.lock:
            return self.reminders.due_within(window, self.clock.now())

    def overdue_reminders(self) -> List[Reminder]:
        with self.store.lock:
            return self.reminders.overdue(self.clock.now())

    def is_overdue(self, reminder_id: str) -> bool:
        with self.store.lock:
            return self.reminders.is_overdue(self.reminders.get(reminder_id), self.clock.now())

    # Triage queue

    def book_appointment(self, draft: Union[AppointmentCreate, Mapping[str, Any]]) -> Appointment:
        """Book an appointment and announce it."""
        draft = _validate(AppointmentCreate, draft)
        with self.store.lock:
            self.pets.lookup_pet(draft.pet_id)
            appointment = self.queue.book(
                draft, self.ids.new_id(self.settings.APPOINTMENT_ID_PREFIX)
            )
            self._notify(
                "Booking Confirmed",
                f"Appointment confirmed for {appointment.date.strftime('%b %d, %Y')}.",
                NotificationClass.SUCCESS,
            )
            return appointment

    def register_walk_in(self, severity: Union[Severity, str], pet_id: Optional[str] = None) -> Appointment:
        """Register a walk-in arriving now.

        Without ``pet_id`` the walk-in is attached to the first registered pet.
        """
        severity = _coerce(Severity, severity, "severity")
        with self.store.lock:
            if pet_id is not None:
                pet = self.pets.lookup_pet(pet_id)
            else:
                roster = self.pets.list_pets()
                if not roster:
                    raise EmptyRosterError()
                pet = roster[0]

            appointment = self.queue.register_walk_in(
                severity,
                pet,
                self.ids.new_id(self.settings.WALK_IN_ID_PREFIX),
                self.clock.now(),
                clinic_name=self.settings.CLINIC_NAME,
                doctor_name=self.settings.WALK_IN_DOCTOR,
            )
            self._notify(
                "New Walk-in",
                f"A {severity.value} priority patient has been added to the queue.",
                NotificationClass.WARNING,
            )
            return appointment

    def update_appointment_status(
        self, appointment_id: str, status: Union[AppointmentStatus, str]
    ) -> Appointment:
        status = _coerce(AppointmentStatus, status, "status")
        with self.store.lock:
            return self.queue.update_status(appointment_id, status)

    def get_appointment(self, appointment_id: str) -> Appointment:
        with self.store.lock:
            return self.queue.get(appointment_id)

    def queue_snapshot(self) -> List[Appointment]:
        with self.store.lock:
            return self.queue.snapshot()

    def count_by_severity(self, level: Union[Severity, str]) -> int:
        with self.store.lock:
            return self.queue.count_by_severity(_coerce(Severity, level, "severity"))

    def count_by_status(self, status: Union[AppointmentStatus, str]) -> int:
        with self.store.lock:
            return self.queue.count_by_status(_coerce(AppointmentStatus, status, "status"))

    def queue_summary(self) -> QueueSummary:
        with self.store.lock:
            return self.queue.summary()

    # Pets

    def list_pets(self) -> List[Pet]:
        return self.pets.list_pets()

    def register_pet(self, draft: Union[PetCreate, Mapping[str, Any]]) -> Pet:
        draft = _validate(PetCreate, draft)
        with self.store.lock:
            pet = self.pets.create_pet(draft)
            self._notify(
                "Pet Added",
                f"{pet.name} has been added to your family profile.",
                NotificationClass.SUCCESS,
            )
            return pet

    def add_history_note(self, pet_id: str, note: str) -> Pet:
        """Append a vet record to a pet's history."""
        if not note or not note.strip():
            raise InvalidInputError("History note must not be blank")
        with self.store.lock:
            pet = self.pets.append_history(pet_id, f"[Vet Record] {note.strip()}")
            self._notify(
                "Record Updated",
                "Clinical note added to patient history.",
                NotificationClass.SUCCESS,
            )
            return pet

    # Notification feed

    def record_event(self, event: Union[NotificationCreate, Mapping[str, Any]]) -> Notification:
        """Add a caller-requested entry to the feed."""
        event = _validate(NotificationCreate, event)
        with self.store.lock:
            return self._notify(
                event.title,
                event.message,
                event.type,
                action_label=event.action_label,
                action_link=event.action_link,
            )

    def feed_snapshot(self, limit: Optional[int] = None, unread_only: bool = False) -> List[Notification]:
        with self.store.lock:
            return self.feed.snapshot(limit=limit, unread_only=unread_only)

    def feed_display(self, limit: Optional[int] = None, unread_only: bool = False) -> NotificationFeedDisplay:
        """Feed snapshot and unread counter taken together."""
        with self.store.lock:
            return NotificationFeedDisplay(
                notifications=self.feed.snapshot(limit=limit, unread_only=unread_only),
                unread_count=self.feed.unread_count(),
            )

    def mark_read(self, notification_id: str) -> Notification:
        with self.store.lock:
            return self.feed.mark_read(notification_id)

    def mark_all_read(self) -> int:
        with self.store.lock:
            changed = self.feed.mark_all_read()
            self.logger.info("notifications_marked_read", changed=changed)
            return changed

    def unread_count(self) -> int:
        with self.store.lock:
            return self.feed.unread_count()
