"""
Medication and vaccine reminder API routes.
"""

from datetime import timedelta
from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from ..models.reminder import Reminder, ReminderConfirmation
from ..services.coordinator import ClinicCoordinator
from .dependencies import get_coordinator

router = APIRouter(prefix="/reminders", tags=["Reminders"])


@router.get("", response_model=List[Reminder])
def list_reminders(
    pet_id: Optional[str] = Query(None, description="Filter by pet"),
    coordinator: ClinicCoordinator = Depends(get_coordinator)
):
    """List reminders ordered by due date."""
    return coordinator.list_reminders(pet_id)


@router.get("/due", response_model=List[Reminder])
def get_due_reminders(
    hours: Optional[int] = Query(None, ge=0, le=24 * 365, description="Look-ahead window"),
    coordinator: ClinicCoordinator = Depends(get_coordinator)
):
    """Reminders coming due within the window."""
    window = timedelta(hours=hours) if hours is not None else None
    return coordinator.due_within(window)


@router.get("/overdue", response_model=List[Reminder])
def get_overdue_reminders(coordinator: ClinicCoordinator = Depends(get_coordinator)):
    """Unconfirmed reminders past their due date."""
    return coordinator.overdue_reminders()


@router.post("/{reminder_id}/confirm", response_model=ReminderConfirmation)
def confirm_medication(
    reminder_id: str,
    coordinator: ClinicCoordinator = Depends(get_coordinator)
):
    """Confirm a medication, vaccine or checkup was given."""
    return coordinator.confirm_medication(reminder_id)
