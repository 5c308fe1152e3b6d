"""Admin dashboard schemas."""
from pydantic import BaseModel
from typing import List, Optional


class GenderCount(BaseModel):
    gender: Optional[str]
    count: int


class PetTypeCount(BaseModel):
    type: Optional[str]
    count: int


class StatsResponse(BaseModel):
    """Counts backing the admin dashboard charts."""
    user_gender_stats: List[GenderCount]
    pet_type_stats: List[PetTypeCount]
    total_users: int
    total_pets: int
    total_posts: int
    total_shops: int
