"""Authentication schemas for PetHub."""
from pydantic import BaseModel, EmailStr, Field
from datetime import datetime
from typing import Optional


class RegisterRequest(BaseModel):
    """Registration request body."""
    full_name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6)
    gender: Optional[str] = Field(None, max_length=20)
    birthdate: Optional[datetime] = None
    profile_picture: Optional[str] = Field(None, max_length=500)


class LoginRequest(BaseModel):
    """Login request body."""
    email: EmailStr
    password: str


class AuthUser(BaseModel):
    """User summary returned with a token."""
    id: int
    full_name: str
    email: str
    profile_picture: Optional[str] = None


class TokenResponse(BaseModel):
    """Response containing JWT token after login or registration."""
    token: str
    is_admin: bool
    user: AuthUser
