"""SQLModel table models for PetHub."""
from pethub.models.user import User
from pethub.models.pet import Pet
from pethub.models.task import Task, TASK_FREQUENCIES
from pethub.models.medical_record import MedicalRecord
from pethub.models.post import Post, Comment, Reply
from pethub.models.shop import Shop

__all__ = [
    "User",
    "Pet",
    "Task",
    "TASK_FREQUENCIES",
    "MedicalRecord",
    "Post",
    "Comment",
    "Reply",
    "Shop",
]
