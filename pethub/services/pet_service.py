"""Pet service for owner-scoped pet CRUD."""
from sqlmodel import Session, select
from typing import Dict, List, Optional

from pethub.models.pet import Pet


class PetService:
    """Service class for pet CRUD operations, always scoped to the owner."""

    def __init__(self, session: Session):
        self.session = session

    def create(
        self,
        user_id: int,
        name: str,
        type: Optional[str] = None,
        breed: Optional[str] = None,
        age: Optional[int] = None,
        pet_picture: Optional[str] = None
    ) -> Pet:
        pet = Pet(
            user_id=user_id,
            name=name.strip(),
            type=type,
            breed=breed,
            age=age,
            pet_picture=pet_picture,
        )
        self.session.add(pet)
        self.session.commit()
        self.session.refresh(pet)
        return pet

    def get_by_user(self, user_id: int) -> List[Pet]:
        statement = select(Pet).where(Pet.user_id == user_id).order_by(Pet.id.asc())
        return list(self.session.exec(statement).all())

    def get_by_id(self, pet_id: int, user_id: int) -> Optional[Pet]:
        """Get a specific pet by ID, ensuring user ownership."""
        statement = (
            select(Pet)
            .where(Pet.id == pet_id)
            .where(Pet.user_id == user_id)
        )
        return self.session.exec(statement).first()

    def get_names(self, user_id: int) -> Dict[int, str]:
        """Pet id to name lookup for the owner's pets."""
        return {pet.id: pet.name for pet in self.get_by_user(user_id)}

    def update(self, pet_id: int, user_id: int, **fields) -> Optional[Pet]:
        """Update the given fields; None values are left unchanged."""
        pet = self.get_by_id(pet_id, user_id)
        if not pet:
            return None

        for name, value in fields.items():
            if value is not None:
                setattr(pet, name, value)

        self.session.commit()
        self.session.refresh(pet)
        return pet

    def delete(self, pet_id: int, user_id: int) -> bool:
        pet = self.get_by_id(pet_id, user_id)
        if not pet:
            return False

        self.session.delete(pet)
        self.session.commit()
        return True

    def list_all(self) -> List[Pet]:
        """Every pet in the system, for the admin panel."""
        return list(self.session.exec(select(Pet).order_by(Pet.id.asc())).all())

    def delete_any(self, pet_id: int) -> bool:
        """Admin delete, ignoring ownership."""
        pet = self.session.get(Pet, pet_id)
        if not pet:
            return False

        self.session.delete(pet)
        self.session.commit()
        return True
