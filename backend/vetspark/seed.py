"""
Demo data for a fresh clinic session.
"""

from datetime import timedelta

import structlog

from .models.notification import NotificationClass
from .models.pet import Pet, PetSex
from .models.queue import Appointment, AppointmentStatus, AppointmentType, Severity
from .models.reminder import Reminder, ReminderKind
from .services.coordinator import ClinicCoordinator

logger = structlog.get_logger(__name__)


DEMO_PETS = [
    Pet(
        id="p1",
        name="Mochi",
        type="Dog",
        breed="Golden Retriever",
        sex=PetSex.MALE,
        weight_kg=28.5,
        age_years=3,
        birthday="2020-05-15",
        food="Royal Canin Adult",
        allergies=["Chicken", "Dust"],
        history=["Vaccination 2023", "Spayed 2022"],
        owner_name="Alice Johnson",
    ),
    Pet(
        id="p2",
        name="Luna",
        type="Cat",
        breed="Siamese Cat",
        sex=PetSex.FEMALE,
        weight_kg=4.2,
        age_years=2,
        birthday="2021-08-20",
        food="Whiskas Wet Food",
        history=["Annual Checkup 2024"],
        owner_name="Alice Johnson",
    ),
]


def seed_demo_data(coordinator: ClinicCoordinator) -> None:
    """Load demo pets, reminders, an appointment and a welcome message.

    Seeded entries are inserted directly and raise no notifications of their own.
    """
    now = coordinator.clock.now()
    today_1030 = now.replace(hour=10, minute=30, second=0, microsecond=0)

    for pet in DEMO_PETS:
        coordinator.pets.add(pet)

    with coordinator.store.lock:
        coordinator.reminders.load([
            Reminder(
                id="m1",
                pet_id="p1",
                name="Apoquel",
                kind=ReminderKind.MEDICINE,
                dosage="16mg",
                frequency="Once Daily",
                due_at=now - timedelta(hours=1),
            ),
            Reminder(
                id="m2",
                pet_id="p2",
                name="Flea Prevention",
                kind=ReminderKind.MEDICINE,
                dosage="1 pipette",
                frequency="Monthly",
                due_at=now + timedelta(days=14),
            ),
            Reminder(
                id="m3",
                pet_id="p1",
                name="Rabies Booster",
                kind=ReminderKind.VACCINE,
                dosage="1 Shot",
                frequency="Annual",
                due_at=now + timedelta(days=2),
            ),
        ])

        coordinator.queue.load(
            Appointment(
                id="a1",
                pet_id="p1",
                clinic_name=coordinator.settings.CLINIC_NAME,
                doctor_name="Dr. Sarah Smith",
                date=today_1030,
                reason="Skin Allergy Follow-up",
                type=AppointmentType.FOLLOWUP,
                severity=Severity.ROUTINE,
                status=AppointmentStatus.CONFIRMED,
                prep_instructions=["Bring previous prescription"],
            )
        )

        coordinator.feed.emit(
            "n-welcome",
            now - timedelta(hours=2),
            "Welcome to VetSpark",
            "Your pet health dashboard is ready. Check out the AI Diagnostics tool!",
            NotificationClass.INFO,
        )

    logger.info("demo_data_seeded", pets=len(DEMO_PETS))
