"""
Pet models.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from enum import Enum


class PetSex(str, Enum):
    """Recorded sex of a pet."""
    MALE = "Male"
    FEMALE = "Female"


class PetBase(BaseModel):
    """Base pet model."""
    name: str = Field(..., min_length=1, max_length=100, description="Pet name")
    type: str = Field(..., min_length=1, max_length=50, description="Dog, Cat, Bird, Other")
    breed: Optional[str] = Field(None, max_length=100)
    sex: Optional[PetSex] = None
    weight_kg: Optional[float] = Field(None, gt=0, le=5000, description="Weight in kilograms")
    age_years: Optional[int] = Field(None, ge=0, le=100)
    birthday: Optional[str] = Field(None, description="YYYY-MM-DD")
    food: Optional[str] = None
    allergies: List[str] = Field(default_factory=list)
    history: List[str] = Field(default_factory=list)
    owner_name: Optional[str] = None


class PetCreate(PetBase):
    """Pet registration model."""
    pass


class Pet(PetBase):
    """Pet response model."""
    id: str


class HistoryNoteCreate(BaseModel):
    """Clinical note to append to a pet's history."""
    note: str = Field(..., max_length=2000)
