"""Task schemas for pet care tasks."""
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

from pethub.schemas.pet import PetResponse


class TaskWrite(BaseModel):
    """Schema for creating or replacing a task.

    ``frequency`` is checked by the router so the API can answer 400 with
    the list of allowed values, as clients expect.
    """
    pet_id: int
    type: str = Field(..., max_length=100)
    description: Optional[str] = Field(None, max_length=1000)
    name: Optional[str] = Field(None, max_length=1000)  # alias clients send for custom tasks
    time: datetime
    frequency: str


class TaskResponse(BaseModel):
    """Schema for task API responses."""
    id: int
    user_id: int
    pet_id: int
    type: str
    description: str
    time: datetime
    frequency: str
    created_at: datetime

    class Config:
        from_attributes = True


class DueTaskResponse(TaskResponse):
    """Task that is already due, with its pet."""
    pet: Optional[PetResponse] = None
