"""Comment and reply routers."""
from fastapi import APIRouter, Depends, HTTPException, status, Query
from typing import List
from sqlmodel import Session

from pethub.db.config import get_session
from pethub.middleware.auth import get_current_user, CurrentUser
from pethub.schemas.post import CommentCreate, CommentResponse, ReplyCreate, ReplyResponse
from pethub.services.post_service import PostService

router = APIRouter(tags=["Comments"])
reply_router = APIRouter(tags=["Comments"])


def get_post_service(session: Session = Depends(get_session)) -> PostService:
    """Dependency for getting PostService instance."""
    return PostService(session)


@router.get("", response_model=List[CommentResponse])
async def list_comments(
    post_id: int = Query(..., description="Post to read comments for"),
    current_user: CurrentUser = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
):
    return service.get_comments(post_id)


@router.post("", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def create_comment(
    comment_data: CommentCreate,
    current_user: CurrentUser = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
):
    if not comment_data.content.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Post ID and comment content are required"
        )

    comment = service.add_comment(current_user.user_id, comment_data.post_id, comment_data.content)
    if not comment:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return comment


@reply_router.get("", response_model=List[ReplyResponse])
async def list_replies(
    comment_id: int = Query(..., description="Comment to read replies for"),
    current_user: CurrentUser = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
):
    return service.get_replies(comment_id)


@reply_router.post("", response_model=ReplyResponse, status_code=status.HTTP_201_CREATED)
async def create_reply(
    reply_data: ReplyCreate,
    current_user: CurrentUser = Depends(get_current_user),
    service: PostService = Depends(get_post_service),
):
    if not reply_data.content.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Comment ID and reply content are required"
        )

    reply = service.add_reply(current_user.user_id, reply_data.comment_id, reply_data.content)
    if not reply:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comment not found")
    return reply
