"""Medical record schemas."""
from pydantic import BaseModel, Field
from datetime import datetime


class MedicalRecordCreate(BaseModel):
    """All fields are required when creating a medical record."""
    pet_id: int
    diagnose: str = Field(..., min_length=1, max_length=255)
    vet_name: str = Field(..., min_length=1, max_length=255)
    medication: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1, max_length=2000)
    date: datetime


class MedicalRecordUpdate(BaseModel):
    """All fields are required when updating a medical record."""
    diagnose: str = Field(..., min_length=1, max_length=255)
    vet_name: str = Field(..., min_length=1, max_length=255)
    medication: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1, max_length=2000)
    date: datetime


class MedicalRecordResponse(BaseModel):
    """Schema for medical record API responses."""
    id: int
    user_id: int
    pet_id: int
    diagnose: str
    vet_name: str
    medication: str
    description: str
    date: datetime
    created_at: datetime

    class Config:
        from_attributes = True
