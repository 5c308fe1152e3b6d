"""Pet model for SQLModel."""
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import DateTime
from datetime import datetime
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from pethub.models.user import User
    from pethub.models.task import Task
    from pethub.models.medical_record import MedicalRecord


class Pet(SQLModel, table=True):
    """Pet owned by a single user."""

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    name: str = Field(max_length=100)
    type: Optional[str] = Field(default=None, max_length=50)  # dog, cat, ...
    breed: Optional[str] = Field(default=None, max_length=100)
    age: Optional[int] = Field(default=None)
    pet_picture: Optional[str] = Field(default=None, max_length=500)
    created_at: datetime = Field(default_factory=datetime.utcnow, sa_type=DateTime)

    # Relationships
    user: "User" = Relationship(back_populates="pets")
    tasks: list["Task"] = Relationship(
        back_populates="pet",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"}
    )
    medical_records: list["MedicalRecord"] = Relationship(
        back_populates="pet",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"}
    )
