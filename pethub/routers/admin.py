"""Admin router: dashboard statistics and moderation."""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from sqlmodel import Session

from pethub.db.config import get_session
from pethub.middleware.auth import require_admin, CurrentUser
from pethub.schemas.admin import StatsResponse
from pethub.schemas.pet import PetResponse
from pethub.schemas.post import PostResponse
from pethub.schemas.user import UserResponse
from pethub.services.pet_service import PetService
from pethub.services.post_service import PostService
from pethub.services.user_service import UserService

router = APIRouter(tags=["Admin"])


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    admin: CurrentUser = Depends(require_admin),
    session: Session = Depends(get_session),
):
    """Users per gender, pets per type and overall totals."""
    return UserService(session).get_stats()


@router.get("/users", response_model=List[UserResponse])
async def list_users(
    admin: CurrentUser = Depends(require_admin),
    session: Session = Depends(get_session),
):
    return UserService(session).list_users()


@router.delete("/users/{user_id}")
async def delete_user(
    user_id: int,
    admin: CurrentUser = Depends(require_admin),
    session: Session = Depends(get_session),
):
    """Delete a non-admin user and everything they own."""
    service = UserService(session)
    user = service.get_by_id(user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    if user.is_admin:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cannot delete admin users")

    service.delete(user_id)
    return {"message": "User deleted successfully"}


@router.get("/pets", response_model=List[PetResponse])
async def list_pets(
    admin: CurrentUser = Depends(require_admin),
    session: Session = Depends(get_session),
):
    return PetService(session).list_all()


@router.delete("/pets/{pet_id}")
async def delete_pet(
    pet_id: int,
    admin: CurrentUser = Depends(require_admin),
    session: Session = Depends(get_session),
):
    if not PetService(session).delete_any(pet_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Pet not found")
    return {"message": "Pet deleted successfully"}


@router.get("/posts", response_model=List[PostResponse])
async def list_posts(
    admin: CurrentUser = Depends(require_admin),
    session: Session = Depends(get_session),
):
    return PostService(session).list_posts()


@router.delete("/posts/{post_id}")
async def delete_post(
    post_id: int,
    admin: CurrentUser = Depends(require_admin),
    session: Session = Depends(get_session),
):
    """Delete any post with its comments and replies."""
    if not PostService(session).delete(post_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return {"message": "Post deleted successfully"}
