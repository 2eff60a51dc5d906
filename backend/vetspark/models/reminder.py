"""
Medication, vaccine and checkup reminder models.
"""

from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from enum import Enum

from ..clock import ensure_utc


class ReminderKind(str, Enum):
    """What the reminder is for."""
    MEDICINE = "Medicine"
    VACCINE = "Vaccine"
    CHECKUP = "Checkup"


class Reminder(BaseModel):
    """A due-dated reminder for one pet."""
    id: str
    pet_id: str
    name: str
    kind: ReminderKind
    dosage: str = Field("", description="Display string, e.g. 16mg")
    frequency: str = Field("", description="Display string, e.g. Once Daily")
    due_at: datetime
    confirmed: bool = False

    @field_validator("due_at")
    @classmethod
    def _utc(cls, v: datetime) -> datetime:
        return ensure_utc(v)


class ReminderConfirmation(BaseModel):
    """Result of confirming a reminder."""
    reminder: Reminder
    already_confirmed: bool = Field(
        False, description="True when the reminder was confirmed by an earlier call"
    )
