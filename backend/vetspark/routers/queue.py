"""
Triage queue and appointment API routes.
"""

from typing import List
from fastapi import APIRouter, status, Depends

from ..models.queue import (
    Appointment,
    AppointmentCreate,
    AppointmentStatusUpdate,
    QueueSummary,
    WalkInRequest,
)
from ..services.coordinator import ClinicCoordinator
from .dependencies import get_coordinator

router = APIRouter(prefix="/appointments", tags=["Triage Queue"])


@router.get("/queue", response_model=List[Appointment])
def get_queue(coordinator: ClinicCoordinator = Depends(get_coordinator)):
    """Current queue, most severe first."""
    return coordinator.queue_snapshot()


@router.get("/summary", response_model=QueueSummary)
def get_queue_summary(coordinator: ClinicCoordinator = Depends(get_coordinator)):
    """Counts by severity and status for dashboard display."""
    return coordinator.queue_summary()


@router.post("", response_model=Appointment, status_code=status.HTTP_201_CREATED)
def book_appointment(
    draft: AppointmentCreate,
    coordinator: ClinicCoordinator = Depends(get_coordinator)
):
    """Book a scheduled appointment."""
    return coordinator.book_appointment(draft)


@router.post("/walk-in", response_model=Appointment, status_code=status.HTTP_201_CREATED)
def register_walk_in(
    request: WalkInRequest,
    coordinator: ClinicCoordinator = Depends(get_coordinator)
):
    """Register a walk-in patient with the given severity."""
    return coordinator.register_walk_in(request.severity, request.pet_id)


@router.get("/{appointment_id}", response_model=Appointment)
def get_appointment(
    appointment_id: str,
    coordinator: ClinicCoordinator = Depends(get_coordinator)
):
    """Get appointment by ID."""
    return coordinator.get_appointment(appointment_id)


@router.put("/{appointment_id}/status", response_model=Appointment)
def update_appointment_status(
    appointment_id: str,
    request: AppointmentStatusUpdate,
    coordinator: ClinicCoordinator = Depends(get_coordinator)
):
    """Update appointment status."""
    return coordinator.update_appointment_status(appointment_id, request.status)
