"""User profile schemas."""
from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class UserResponse(BaseModel):
    """Public view of a user; never carries the password hash."""
    id: int
    full_name: str
    email: str
    gender: Optional[str] = None
    birthdate: Optional[datetime] = None
    profile_picture: Optional[str] = None
    is_admin: bool = False
    created_at: datetime

    class Config:
        from_attributes = True


class ProfileUpdate(BaseModel):
    """Schema for updating the caller's own profile."""
    full_name: Optional[str] = Field(None, min_length=1, max_length=255)
    gender: Optional[str] = Field(None, max_length=20)
    birthdate: Optional[datetime] = None
    profile_picture: Optional[str] = Field(None, max_length=500)


class UserSummary(BaseModel):
    """Author info embedded in posts, comments and replies."""
    id: int
    full_name: str
    profile_picture: Optional[str] = None

    class Config:
        from_attributes = True
