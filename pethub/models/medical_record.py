"""Medical record model for SQLModel."""
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import DateTime
from datetime import datetime
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from pethub.models.user import User
    from pethub.models.pet import Pet


class MedicalRecord(SQLModel, table=True):
    """Vet visit or treatment recorded for a pet."""

    __tablename__ = "medical_record"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    pet_id: int = Field(foreign_key="pet.id", index=True)
    diagnose: str = Field(max_length=255)
    vet_name: str = Field(max_length=255)
    medication: str = Field(max_length=255)
    description: str = Field(max_length=2000)
    date: datetime = Field(sa_type=DateTime)
    created_at: datetime = Field(default_factory=datetime.utcnow, sa_type=DateTime)

    # Relationships
    user: "User" = Relationship(back_populates="medical_records")
    pet: "Pet" = Relationship(back_populates="medical_records")
