"""
Pet directory service.
"""

import threading
from typing import Dict, List, Protocol

from ..clock import IdGenerator
from ..exceptions import InvalidInputError, NotFoundError
from ..models.pet import Pet, PetCreate


class PetDirectory(Protocol):
    """Read access to registered pets."""

    def lookup_pet(self, pet_id: str) -> Pet:
        ...

    def list_pets(self) -> List[Pet]:
        ...


class PetRegistry(PetDirectory, Protocol):
    """Pet directory that also accepts registrations and history notes."""

    def create_pet(self, pet_data: PetCreate) -> Pet:
        ...

    def add(self, pet: Pet) -> Pet:
        ...

    def append_history(self, pet_id: str, entry: str) -> Pet:
        ...


class InMemoryPetDirectory:
    """Pet directory kept in process memory, in registration order."""

    def __init__(self, ids: IdGenerator, id_prefix: str = "p"):
        self._ids = ids
        self._id_prefix = id_prefix
        self._pets: Dict[str, Pet] = {}
        self._lock = threading.RLock()

    def lookup_pet(self, pet_id: str) -> Pet:
        """Get pet by ID."""
        with self._lock:
            pet = self._pets.get(pet_id)
            if pet is None:
                raise NotFoundError("Pet", pet_id)
            return pet.model_copy(deep=True)

    def list_pets(self) -> List[Pet]:
        """All pets in registration order."""
        with self._lock:
            return [p.model_copy(deep=True) for p in self._pets.values()]

    def create_pet(self, pet_data: PetCreate) -> Pet:
        """Register a new pet."""
        pet = Pet(id=self._ids.new_id(self._id_prefix), **pet_data.model_dump())
        return self.add(pet)

    def add(self, pet: Pet) -> Pet:
        """Insert a pet with a known id (seed/import)."""
        with self._lock:
            if pet.id in self._pets:
                raise InvalidInputError(f"Duplicate pet id: {pet.id}")
            self._pets[pet.id] = pet.model_copy(deep=True)
        return pet.model_copy(deep=True)

    def append_history(self, pet_id: str, entry: str) -> Pet:
        """Append an entry to a pet's history."""
        with self._lock:
            pet = self._pets.get(pet_id)
            if pet is None:
                raise NotFoundError("Pet", pet_id)
            pet.history.append(entry)
            return pet.model_copy(deep=True)
