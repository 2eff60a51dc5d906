"""
Pet directory API routes.
"""

from typing import List
from fastapi import APIRouter, status, Depends

from ..models.pet import Pet, PetCreate, HistoryNoteCreate
from ..services.coordinator import ClinicCoordinator
from .dependencies import get_coordinator

router = APIRouter(prefix="/pets", tags=["Pets"])


@router.get("", response_model=List[Pet])
def list_pets(coordinator: ClinicCoordinator = Depends(get_coordinator)):
    """List registered pets."""
    return coordinator.list_pets()


@router.post("", response_model=Pet, status_code=status.HTTP_201_CREATED)
def register_pet(
    pet_data: PetCreate,
    coordinator: ClinicCoordinator = Depends(get_coordinator)
):
    """Register a new pet."""
    return coordinator.register_pet(pet_data)


@router.post("/{pet_id}/history", response_model=Pet)
def add_history_note(
    pet_id: str,
    request: HistoryNoteCreate,
    coordinator: ClinicCoordinator = Depends(get_coordinator)
):
    """Add a clinical note to the pet's history."""
    return coordinator.add_history_note(pet_id, request.note)
