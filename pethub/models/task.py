"""Task model for SQLModel."""
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import DateTime
from datetime import datetime
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from pethub.models.user import User
    from pethub.models.pet import Pet

TASK_FREQUENCIES = ("daily", "weekly", "scheduled")

# Core care types are limited to one task per pet
CORE_TASK_TYPES = ("Feeding", "Pooping", "Drinking")


class Task(SQLModel, table=True):
    """Care task for a pet.

    ``time`` is a full instant for scheduled tasks. Daily tasks only use its
    time of day, weekly tasks its weekday and time of day.
    """

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    pet_id: int = Field(foreign_key="pet.id", index=True)
    type: str = Field(max_length=100)  # Feeding, Walking, or a custom label
    description: str = Field(max_length=1000)
    time: datetime = Field(sa_type=DateTime)
    frequency: str = Field(max_length=20)  # daily, weekly, scheduled
    created_at: datetime = Field(default_factory=datetime.utcnow, sa_type=DateTime)

    # Relationships
    user: "User" = Relationship(back_populates="tasks")
    pet: "Pet" = Relationship(back_populates="tasks")
