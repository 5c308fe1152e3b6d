"""Pet router."""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from sqlmodel import Session

from pethub.db.config import get_session
from pethub.middleware.auth import get_current_user, CurrentUser
from pethub.schemas.pet import PetCreate, PetUpdate, PetResponse
from pethub.services.pet_service import PetService

router = APIRouter(tags=["Pets"])


def get_pet_service(session: Session = Depends(get_session)) -> PetService:
    """Dependency for getting PetService instance."""
    return PetService(session)


@router.get("", response_model=List[PetResponse])
async def list_pets(
    current_user: CurrentUser = Depends(get_current_user),
    service: PetService = Depends(get_pet_service),
):
    """List the caller's pets."""
    return service.get_by_user(current_user.user_id)


@router.post("", response_model=PetResponse, status_code=status.HTTP_201_CREATED)
async def create_pet(
    pet_data: PetCreate,
    current_user: CurrentUser = Depends(get_current_user),
    service: PetService = Depends(get_pet_service),
):
    """Create a pet for the caller."""
    return service.create(
        user_id=current_user.user_id,
        name=pet_data.name,
        type=pet_data.type,
        breed=pet_data.breed,
        age=pet_data.age,
        pet_picture=pet_data.pet_picture,
    )


@router.get("/{pet_id}", response_model=PetResponse)
async def get_pet(
    pet_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    service: PetService = Depends(get_pet_service),
):
    pet = service.get_by_id(pet_id, current_user.user_id)
    if not pet:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pet not found")
    return pet


@router.put("/{pet_id}", response_model=PetResponse)
async def update_pet(
    pet_id: int,
    pet_data: PetUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    service: PetService = Depends(get_pet_service),
):
    pet = service.update(pet_id, current_user.user_id, **pet_data.model_dump(exclude_unset=True))
    if not pet:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pet not found")
    return pet


@router.delete("/{pet_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_pet(
    pet_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    service: PetService = Depends(get_pet_service),
):
    """Delete a pet together with its tasks and medical records."""
    if not service.delete(pet_id, current_user.user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pet not found")
