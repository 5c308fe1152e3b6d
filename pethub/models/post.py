"""Post, comment and reply models for SQLModel."""
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import DateTime
from datetime import datetime
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from pethub.models.user import User


class Post(SQLModel, table=True):
    """Social post. ``content`` holds the image URL, ``caption`` the text."""

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    content: str = Field(default="", max_length=500)
    caption: Optional[str] = Field(default=None, max_length=2000)
    likes: int = Field(default=0)
    created_at: datetime = Field(default_factory=datetime.utcnow, sa_type=DateTime)

    # Relationships
    user: "User" = Relationship(back_populates="posts")
    comments: list["Comment"] = Relationship(
        back_populates="post",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "order_by": "desc(Comment.id)"}
    )


class Comment(SQLModel, table=True):
    """Comment on a post."""

    id: Optional[int] = Field(default=None, primary_key=True)
    post_id: int = Field(foreign_key="post.id", index=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    content: str = Field(max_length=2000)
    created_at: datetime = Field(default_factory=datetime.utcnow, sa_type=DateTime)

    # Relationships
    post: "Post" = Relationship(back_populates="comments")
    user: "User" = Relationship(back_populates="comments")
    replies: list["Reply"] = Relationship(
        back_populates="comment",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "order_by": "Reply.id"}
    )


class Reply(SQLModel, table=True):
    """Reply to a comment."""

    id: Optional[int] = Field(default=None, primary_key=True)
    comment_id: int = Field(foreign_key="comment.id", index=True)
    user_id: int = Field(foreign_key="user.id", index=True)
    content: str = Field(max_length=2000)
    created_at: datetime = Field(default_factory=datetime.utcnow, sa_type=DateTime)

    # Relationships
    comment: "Comment" = Relationship(back_populates="replies")
    user: "User" = Relationship(back_populates="replies")
