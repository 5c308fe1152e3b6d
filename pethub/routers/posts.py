"""Post router for the social feed."""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
from sqlmodel import Session

from pethub.db.config import get_session
from pethub.middleware.auth import get_current_user, CurrentUser
from pethub.schemas.post import PostCreate, PostResponse, LikeUpdate
from pethub.services.post_service import PostService

router = APIRouter(tags=["Posts"])


def get_post_service(session: Session = Depends(get_session)) -> PostService:
    """Dependency for getting PostService instance."""
    return PostService(session)


@router.get("", response_model=List[PostResponse])
async def list_posts(
    current_user: CurrentUser = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
):
    """All posts, newest first, with comments (newest first) and replies (oldest first)."""
    return service.list_posts()


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    post_data: PostCreate,
    current_user: CurrentUser = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
):
    return service.create(current_user.user_id, caption=post_data.caption, content=post_data.content)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
):
    post = service.get_by_id(post_id)
    if not post:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return post


@router.put("/{post_id}/like", response_model=PostResponse)
async def like_post(
    post_id: int,
    like: LikeUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
):
    """Increment (or with a negative value, decrement) the like count."""
    post = service.add_likes(post_id, like.likes)
    if not post:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return post


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: int,
    current_user: CurrentUser = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
):
    """Delete one of the caller's own posts."""
    post = service.get_by_id(post_id)
    if not post:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    if post.user_id != current_user.user_id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="You can only delete your own posts"
        )
    service.delete(post_id)
