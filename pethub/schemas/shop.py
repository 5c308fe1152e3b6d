"""Shop schemas."""
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class ShopWrite(BaseModel):
    """Schema for creating or replacing a shop."""
    name: str = Field(..., min_length=1, max_length=255)
    type: str = Field(..., min_length=1, max_length=50)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    contact_number: Optional[str] = Field(None, max_length=50)
    working_hours: Optional[str] = Field(None, max_length=100)
    working_days: Optional[str] = Field(None, max_length=100)
    image: Optional[str] = Field(None, max_length=500)


class ShopResponse(BaseModel):
    id: int
    name: str
    type: str
    latitude: float
    longitude: float
    contact_number: Optional[str] = None
    working_hours: Optional[str] = None
    working_days: Optional[str] = None
    image: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
