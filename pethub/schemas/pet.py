"""Pet schemas."""
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class PetCreate(BaseModel):
    """Schema for creating a pet."""
    name: str = Field(..., min_length=1, max_length=100)
    type: Optional[str] = Field(None, max_length=50)
    breed: Optional[str] = Field(None, max_length=100)
    age: Optional[int] = Field(None, ge=0)
    pet_picture: Optional[str] = Field(None, max_length=500)


class PetUpdate(BaseModel):
    """Schema for updating a pet; omitted fields stay unchanged."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    type: Optional[str] = Field(None, max_length=50)
    breed: Optional[str] = Field(None, max_length=100)
    age: Optional[int] = Field(None, ge=0)
    pet_picture: Optional[str] = Field(None, max_length=500)


class PetResponse(BaseModel):
    """Schema for pet API responses."""
    id: int
    user_id: int
    name: str
    type: Optional[str] = None
    breed: Optional[str] = None
    age: Optional[int] = None
    pet_picture: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
