"""User profile router."""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from pethub.db.config import get_session
from pethub.middleware.auth import get_current_user, CurrentUser
from pethub.schemas.user import UserResponse, ProfileUpdate
from pethub.services.user_service import UserService

router = APIRouter(tags=["Users"])


def get_user_service(session: Session = Depends(get_session)) -> UserService:
    """Dependency for getting UserService instance."""
    return UserService(session)


@router.get("/profile", response_model=UserResponse)
async def get_profile(
    current_user: CurrentUser = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    """Get the caller's profile."""
    user = service.get_by_id(current_user.user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.put("/profile", response_model=UserResponse)
async def update_profile(
    profile: ProfileUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    """Update the caller's profile."""
    user = service.update_profile(
        current_user.user_id,
        full_name=profile.full_name,
        gender=profile.gender,
        birthdate=profile.birthdate,
        profile_picture=profile.profile_picture,
    )
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
