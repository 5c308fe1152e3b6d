"""Task router for pet care tasks."""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List, Optional
from sqlmodel import Session

from pethub.db.config import get_session
from pethub.middleware.auth import get_current_user, CurrentUser
from pethub.schemas.task import TaskWrite, TaskResponse
from pethub.services.pet_service import PetService
from pethub.services.task_service import TaskService
from pethub.services.task_validator import TaskValidator

router = APIRouter(tags=["Tasks"])


def get_task_service(session: Session = Depends(get_session)) -> TaskService:
    """Dependency for getting TaskService instance."""
    return TaskService(session)


def _validated_description(
    task_data: TaskWrite,
    current_user: CurrentUser,
    session: Session,
    service: TaskService,
    task_id: Optional[int] = None,
) -> str:
    """Run the shared create/update checks and return the description to store."""
    validation = TaskValidator.validate_task(task_data.model_dump(), strict=task_id is not None)
    if not validation["valid"]:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=", ".join(validation["errors"]))

    if not PetService(session).get_by_id(task_data.pet_id, current_user.user_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid petId")

    if TaskValidator.is_core_type(task_data.type):
        existing = service.find_type_for_pet(current_user.user_id, task_data.pet_id, task_data.type)
        if existing and existing.id != task_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"A {task_data.type} task already exists for this pet."
            )

    return validation["description"]


@router.get("", response_model=List[TaskResponse])
async def list_tasks(
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
    pet_id: Optional[int] = Query(None, description="Only tasks for this pet"),
    pet_id_camel: Optional[int] = Query(None, alias="petId", description="Same filter as sent by the mobile client"),
):
    """List the caller's tasks in id order, optionally for one pet (``petId`` or ``pet_id``)."""
    if pet_id is None:
        pet_id = pet_id_camel
    return service.get_by_user(current_user.user_id, pet_id=pet_id)


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    task_data: TaskWrite,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
    service: TaskService = Depends(get_task_service),
):
    """Create a task. Any non-empty type is allowed; frequency is daily, weekly or scheduled."""
    description = _validated_description(task_data, current_user, session, service)
    return service.create(
        user_id=current_user.user_id,
        pet_id=task_data.pet_id,
        type=task_data.type,
        description=description,
        time=task_data.time,
        frequency=task_data.frequency,
    )


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    task = service.get_by_id(task_id, current_user.user_id)
    if not task:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: int,
    task_data: TaskWrite,
    current_user: CurrentUser = Depends(get_current_user),
    session: Session = Depends(get_session),
    service: TaskService = Depends(get_task_service),
):
    """Replace a task's fields."""
    if not service.get_by_id(task_id, current_user.user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")

    description = _validated_description(task_data, current_user, session, service, task_id=task_id)
    return service.update(
        task_id=task_id,
        user_id=current_user.user_id,
        pet_id=task_data.pet_id,
        type=task_data.type,
        description=description,
        time=task_data.time,
        frequency=task_data.frequency,
    )


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    task_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    """Delete a task."""
    if not service.delete(task_id, current_user.user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
