"""Services package for VetSpark."""

from .pet_service import PetDirectory, PetRegistry, InMemoryPetDirectory
from .reminder_service import ReminderTracker
from .queue_service import TriageQueue
from .notification_service import NotificationFeed
from .coordinator import ClinicCoordinator

__all__ = [
    "PetDirectory",
    "PetRegistry",
    "InMemoryPetDirectory",
    "ReminderTracker",
    "TriageQueue",
    "NotificationFeed",
    "ClinicCoordinator"
]
