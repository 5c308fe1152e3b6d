"""Task service for pet care tasks."""
from sqlmodel import Session, select
from sqlalchemy.orm import selectinload
from typing import List, Optional
from datetime import datetime
import logging

from pethub.models.task import Task
from pethub.utils.datetime_utils import to_naive_utc

logger = logging.getLogger(__name__)


class TaskService:
    """Service class for task CRUD operations, scoped to the owner."""

    def __init__(self, session: Session):
        self.session = session

    def create(
        self,
        user_id: int,
        pet_id: int,
        type: str,
        description: str,
        time: datetime,
        frequency: str
    ) -> Task:
        """Create a new task."""
        task = Task(
            user_id=user_id,
            pet_id=pet_id,
            type=type.strip(),
            description=description,
            time=to_naive_utc(time),
            frequency=frequency,
        )

        self.session.add(task)
        self.session.commit()
        self.session.refresh(task)
        logger.info("Created %s task %s for pet %s", frequency, task.id, pet_id)
        return task

    def get_by_user(self, user_id: int, pet_id: Optional[int] = None) -> List[Task]:
        """Get the user's tasks, optionally for one pet, in id order."""
        statement = select(Task).where(Task.user_id == user_id)
        if pet_id is not None:
            statement = statement.where(Task.pet_id == pet_id)
        statement = statement.order_by(Task.id.asc())
        return list(self.session.exec(statement).all())

    def get_by_id(self, task_id: int, user_id: int) -> Optional[Task]:
        """Get a specific task by ID, ensuring user ownership."""
        statement = (
            select(Task)
            .where(Task.id == task_id)
            .where(Task.user_id == user_id)
        )
        return self.session.exec(statement).first()

    def find_type_for_pet(self, user_id: int, pet_id: int, type: str) -> Optional[Task]:
        """First task of the given type for a pet, used to keep core types unique."""
        statement = (
            select(Task)
            .where(Task.user_id == user_id)
            .where(Task.pet_id == pet_id)
            .where(Task.type == type)
        )
        return self.session.exec(statement).first()

    def update(
        self,
        task_id: int,
        user_id: int,
        pet_id: int,
        type: str,
        description: str,
        time: datetime,
        frequency: str
    ) -> Optional[Task]:
        """Replace a task's fields, ensuring user ownership."""
        task = self.get_by_id(task_id, user_id)
        if not task:
            return None

        task.pet_id = pet_id
        task.type = type.strip()
        task.description = description
        task.time = to_naive_utc(time)
        task.frequency = frequency

        self.session.commit()
        self.session.refresh(task)
        return task

    def delete(self, task_id: int, user_id: int) -> bool:
        """Delete a task, ensuring user ownership."""
        task = self.get_by_id(task_id, user_id)
        if not task:
            return False

        self.session.delete(task)
        self.session.commit()
        return True

    def get_due(self, user_id: int, now: datetime) -> List[Task]:
        """Tasks whose stored time is at or before ``now``, with their pet loaded."""
        statement = (
            select(Task)
            .where(Task.user_id == user_id)
            .where(Task.time <= to_naive_utc(now))
            .options(selectinload(Task.pet))
            .order_by(Task.time.asc())
        )
        return list(self.session.exec(statement).all())
