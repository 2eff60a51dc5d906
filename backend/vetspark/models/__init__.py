"""Pydantic models for VetSpark."""

from .pet import Pet, PetCreate, PetSex, HistoryNoteCreate
from .reminder import Reminder, ReminderKind, ReminderConfirmation
from .queue import (
    Appointment,
    AppointmentCreate,
    AppointmentStatus,
    AppointmentStatusUpdate,
    AppointmentType,
    QueueSummary,
    Severity,
    SEVERITY_WEIGHT,
    WalkInRequest
)
from .notification import (
    Notification,
    NotificationClass,
    NotificationCreate,
    NotificationFeedDisplay
)

__all__ = [
    # Pet
    "Pet", "PetCreate", "PetSex", "HistoryNoteCreate",
    # Reminder
    "Reminder", "ReminderKind", "ReminderConfirmation",
    # Queue
    "Appointment", "AppointmentCreate", "AppointmentStatus", "AppointmentStatusUpdate",
    "AppointmentType", "QueueSummary", "Severity", "SEVERITY_WEIGHT", "WalkInRequest",
    # Notification
    "Notification", "NotificationClass", "NotificationCreate", "NotificationFeedDisplay"
]
