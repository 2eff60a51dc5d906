"""
Triage queue management service.
"""

from datetime import datetime
from typing import List

import structlog

from ..database import ClinicStore
from ..exceptions import InvalidInputError, NotFoundError
from ..models.queue import (
    Appointment,
    AppointmentCreate,
    AppointmentStatus,
    AppointmentType,
    QueueSummary,
    Severity,
)
from ..models.pet import Pet

logger = structlog.get_logger(__name__)


def triage_key(appointment: Appointment):
    """Sort key: highest severity first, then earliest date."""
    return (-appointment.severity.weight, appointment.date)


class TriageQueue:
    """Ordered appointment queue (booked and walk-in).

    The store's appointment list is kept sorted by ``triage_key`` after every
    insert. ``list.sort`` is stable, so exact ties stay in insertion order.
    The caller is expected to hold ``store.lock``.
    """

    def __init__(self, store: ClinicStore):
        self.store = store
        self.logger = logger.bind(component="triage_queue")

    def _insert(self, appointment: Appointment) -> Appointment:
        if any(a.id == appointment.id for a in self.store.appointments):
            raise InvalidInputError(f"Duplicate appointment id: {appointment.id}")
        self.store.appointments.append(appointment)
        self.store.appointments.sort(key=triage_key)
        return appointment.model_copy(deep=True)

    def _find(self, appointment_id: str) -> Appointment:
        for appointment in self.store.appointments:
            if appointment.id == appointment_id:
                return appointment
        raise NotFoundError("Appointment", appointment_id)

    def load(self, appointment: Appointment) -> Appointment:
        """Insert an appointment with a known id (seed/import)."""
        return self._insert(appointment.model_copy(deep=True))

    def book(self, draft: AppointmentCreate, appointment_id: str) -> Appointment:
        """Book a scheduled appointment."""
        appointment = Appointment(
            id=appointment_id,
            status=AppointmentStatus.CONFIRMED,
            is_walk_in=False,
            **draft.model_dump(include=set(AppointmentCreate.model_fields)),
        )
        booked = self._insert(appointment)
        self.logger.info(
            "appointment_booked",
            appointment_id=booked.id,
            pet_id=booked.pet_id,
            severity=booked.severity.value,
            date=booked.date.isoformat(),
        )
        return booked

    def register_walk_in(
        self,
        severity: Severity,
        pet: Pet,
        appointment_id: str,
        now: datetime,
        clinic_name: str,
        doctor_name: str,
    ) -> Appointment:
        """Add a walk-in patient arriving now."""
        appointment = Appointment(
            id=appointment_id,
            pet_id=pet.id,
            clinic_name=clinic_name,
            doctor_name=doctor_name,
            date=now,
            reason="Walk-in Patient",
            type=AppointmentType.EMERGENCY if severity == Severity.CRITICAL else AppointmentType.CHECKUP,
            severity=severity,
            status=AppointmentStatus.CONFIRMED,
            is_walk_in=True,
        )
        registered = self._insert(appointment)
        self.logger.info(
            "walk_in_registered",
            appointment_id=registered.id,
            pet_id=pet.id,
            severity=severity.value,
        )
        return registered

    def get(self, appointment_id: str) -> Appointment:
        """Get appointment by ID."""
        return self._find(appointment_id).model_copy(deep=True)

    def update_status(self, appointment_id: str, status: AppointmentStatus) -> Appointment:
        """Record a status transition made by the clinic workflow."""
        appointment = self._find(appointment_id)
        previous = appointment.status
        appointment.status = status
        self.logger.info(
            "appointment_status_updated",
            appointment_id=appointment_id,
            previous=previous.value,
            status=status.value,
        )
        return appointment.model_copy(deep=True)

    def snapshot(self) -> List[Appointment]:
        """Current queue order."""
        return [a.model_copy(deep=True) for a in self.store.appointments]

    def count_by_severity(self, level: Severity) -> int:
        return sum(1 for a in self.store.appointments if a.severity == level)

    def count_by_status(self, status: AppointmentStatus) -> int:
        return sum(1 for a in self.store.appointments if a.status == status)

    def summary(self) -> QueueSummary:
        """Queue aggregates for dashboard display."""
        next_up = next(
            (a for a in self.store.appointments if a.status == AppointmentStatus.CONFIRMED),
            None,
        )
        return QueueSummary(
            total=len(self.store.appointments),
            by_severity={level: self.count_by_severity(level) for level in Severity},
            by_status={status: self.count_by_status(status) for status in AppointmentStatus},
            next_appointment=next_up.model_copy(deep=True) if next_up else None,
        )
