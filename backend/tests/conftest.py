"""Shared fixtures for coordinator tests."""
import itertools
from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest

from vetspark.config import Settings
from vetspark.database import ClinicStore
from vetspark.models.pet import PetCreate
from vetspark.models.reminder import Reminder, ReminderKind
from vetspark.services.coordinator import ClinicCoordinator
from vetspark.services.pet_service import InMemoryPetDirectory

T0 = datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime = T0):
        self.current = start

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> datetime:
        self.current = self.current + timedelta(**kwargs)
        return self.current


class CountingIds:
    """Deterministic ids: a-1, a-2, n-3, ..."""

    def __init__(self):
        self._counter = itertools.count(1)

    def new_id(self, prefix: str) -> str:
        return f"{prefix}-{next(self._counter)}"


@pytest.fixture
def settings() -> Settings:
    return Settings(SEED_DEMO_DATA=False, LOG_FORMAT="console")


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def ids() -> CountingIds:
    return CountingIds()


@pytest.fixture
def store() -> ClinicStore:
    return ClinicStore().open()


@pytest.fixture
def empty_coordinator(store, clock, ids, settings) -> ClinicCoordinator:
    """Coordinator with no pets registered."""
    pets = InMemoryPetDirectory(ids, settings.PET_ID_PREFIX)
    return ClinicCoordinator(store=store, pets=pets, clock=clock, ids=ids, settings=settings)


@pytest.fixture
def coordinator(empty_coordinator) -> ClinicCoordinator:
    """Coordinator with two pets and no notifications yet."""
    pets = empty_coordinator.pets
    pets.create_pet(PetCreate(name="Mochi", type="Dog"))
    pets.create_pet(PetCreate(name="Luna", type="Cat"))
    return empty_coordinator


@pytest.fixture
def pet_ids(coordinator) -> list:
    return [p.id for p in coordinator.list_pets()]


def make_reminder(reminder_id: str, pet_id: str, due_at: datetime, confirmed: bool = False,
                  kind: ReminderKind = ReminderKind.MEDICINE, name: Optional[str] = None) -> Reminder:
    return Reminder(
        id=reminder_id,
        pet_id=pet_id,
        name=name or f"Reminder {reminder_id}",
        kind=kind,
        dosage="1 tablet",
        frequency="Once Daily",
        due_at=due_at,
        confirmed=confirmed,
    )


def draft(pet_id: str, date: datetime, severity: str = "ROUTINE", type: str = "CHECKUP", **extra) -> dict:
    data = {
        "pet_id": pet_id,
        "clinic_name": "Happy Paws Hospital",
        "doctor_name": "Dr. Sarah Smith",
        "date": date,
        "type": type,
        "severity": severity,
        "reason": "Checkup",
    }
    data.update(extra)
    return data
