"""Post, comment and reply schemas."""
from pydantic import BaseModel, Field
from datetime import datetime
from typing import List, Optional

from pethub.schemas.user import UserSummary


class PostCreate(BaseModel):
    """Schema for creating a post. ``content`` is the image URL."""
    caption: Optional[str] = Field(None, max_length=2000)
    content: str = Field("", max_length=500)


class LikeUpdate(BaseModel):
    """Like delta: +1 to like, -1 to unlike."""
    likes: int


class CommentCreate(BaseModel):
    post_id: int
    content: str = Field(..., max_length=2000)


class ReplyCreate(BaseModel):
    comment_id: int
    content: str = Field(..., max_length=2000)


class ReplyResponse(BaseModel):
    id: int
    comment_id: int
    user_id: int
    content: str
    created_at: datetime
    user: Optional[UserSummary] = None

    class Config:
        from_attributes = True


class CommentResponse(BaseModel):
    id: int
    post_id: int
    user_id: int
    content: str
    created_at: datetime
    user: Optional[UserSummary] = None
    replies: List[ReplyResponse] = []

    class Config:
        from_attributes = True


class PostResponse(BaseModel):
    """Post with its author and comment thread."""
    id: int
    user_id: int
    content: str
    caption: Optional[str] = None
    likes: int
    created_at: datetime
    user: Optional[UserSummary] = None
    comments: List[CommentResponse] = []

    class Config:
        from_attributes = True
