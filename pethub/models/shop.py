"""Shop model for SQLModel."""
from sqlmodel import SQLModel, Field
from sqlalchemy import DateTime
from datetime import datetime
from typing import Optional


class Shop(SQLModel, table=True):
    """Pet shop or clinic shown on the map."""

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    type: str = Field(max_length=50)  # shop, clinic, grooming, ...
    latitude: float
    longitude: float
    contact_number: Optional[str] = Field(default=None, max_length=50)
    working_hours: Optional[str] = Field(default=None, max_length=100)
    working_days: Optional[str] = Field(default=None, max_length=100)
    image: Optional[str] = Field(default=None, max_length=500)
    created_at: datetime = Field(default_factory=datetime.utcnow, sa_type=DateTime)
