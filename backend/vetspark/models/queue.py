"""
Appointment and triage queue models.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List, Dict
from datetime import datetime
from enum import Enum

from ..clock import ensure_utc


class Severity(str, Enum):
    """Triage severity levels."""
    CRITICAL = "CRITICAL"
    URGENT = "URGENT"
    ROUTINE = "ROUTINE"

    @property
    def weight(self) -> int:
        return SEVERITY_WEIGHT[self]


SEVERITY_WEIGHT = {
    Severity.CRITICAL: 3,
    Severity.URGENT: 2,
    Severity.ROUTINE: 1,
}


class AppointmentType(str, Enum):
    """Kind of visit."""
    VACCINE = "VACCINE"
    CHECKUP = "CHECKUP"
    SURGERY = "SURGERY"
    EMERGENCY = "EMERGENCY"
    FOLLOWUP = "FOLLOWUP"
    SICK = "SICK"


class AppointmentStatus(str, Enum):
    """Appointment workflow states."""
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class AppointmentCreate(BaseModel):
    """Draft for booking a scheduled appointment."""
    pet_id: str = Field(..., min_length=1)
    clinic_name: str = Field(..., min_length=1, max_length=200)
    doctor_name: Optional[str] = None
    date: datetime
    type: AppointmentType
    severity: Severity = Severity.ROUTINE
    reason: str = Field(..., min_length=1, max_length=500)
    symptoms: Optional[str] = None
    prep_instructions: List[str] = Field(default_factory=list, description="What to bring/do before")

    @field_validator("date")
    @classmethod
    def _utc(cls, v: datetime) -> datetime:
        return ensure_utc(v)


class Appointment(AppointmentCreate):
    """Appointment in the triage queue."""
    id: str
    status: AppointmentStatus = AppointmentStatus.CONFIRMED
    is_walk_in: bool = False


class WalkInRequest(BaseModel):
    """Register a walk-in patient."""
    severity: Severity
    pet_id: Optional[str] = None  # None attaches to the first known pet


class AppointmentStatusUpdate(BaseModel):
    """Advance an appointment's status."""
    status: AppointmentStatus


class QueueSummary(BaseModel):
    """Queue aggregates for dashboard display."""
    total: int = 0
    by_severity: Dict[Severity, int] = {}
    by_status: Dict[AppointmentStatus, int] = {}
    next_appointment: Optional[Appointment] = None
