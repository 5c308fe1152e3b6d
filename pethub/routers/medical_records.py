"""Medical record router."""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional
from sqlmodel import Session

from pethub.db.config import get_session
from pethub.middleware.auth import get_current_user, CurrentUser
from pethub.schemas.medical_record import (
    MedicalRecordCreate,
    MedicalRecordUpdate,
    MedicalRecordResponse,
)
from pethub.services.medical_record_service import MedicalRecordService
from pethub.services.pet_service import PetService

router = APIRouter(tags=["Medical Records"])


def get_record_service(session: Session = Depends(get_session)) -> MedicalRecordService:
    """Dependency for getting MedicalRecordService instance."""
    return MedicalRecordService(session)


@router.get("", response_model=List[MedicalRecordResponse])
async def list_records(
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
    service: MedicalRecordService = Depends(get_record_service),
    pet_id: Optional[int] = Query(None, description="Only records for this pet"),
):
    """List the caller's medical records, newest visit first."""
    if pet_id is not None and not PetService(session).get_by_id(pet_id, current_user.user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pet not found or unauthorized")
    return service.get_by_user(current_user.user_id, pet_id=pet_id)


@router.post("", response_model=MedicalRecordResponse, status_code=status.HTTP_201_CREATED)
async def create_record(
    record_data: MedicalRecordCreate,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
    service: MedicalRecordService = Depends(get_record_service),
):
    if not PetService(session).get_by_id(record_data.pet_id, current_user.user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pet not found or unauthorized")

    return service.create(user_id=current_user.user_id, **record_data.model_dump())


@router.get("/{record_id}", response_model=MedicalRecordResponse)
async def get_record(
    record_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    service: MedicalRecordService = Depends(get_record_service),
):
    record = service.get_by_id(record_id, current_user.user_id)
    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Medical record not found or unauthorized"
        )
    return record


@router.put("/{record_id}", response_model=MedicalRecordResponse)
async def update_record(
    record_id: int,
    record_data: MedicalRecordUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    service: MedicalRecordService = Depends(get_record_service),
):
    record = service.update(record_id, current_user.user_id, **record_data.model_dump())
    if not record:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Medical record not found or unauthorized"
        )
    return record


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_record(
    record_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    service: MedicalRecordService = Depends(get_record_service),
):
    if not service.delete(record_id, current_user.user_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Medical record not found or unauthorized"
        )
