"""Post service for the social feed: posts, likes, comments and replies."""
from sqlmodel import Session, select
from typing import List, Optional
import logging

from pethub.models.post import Post, Comment, Reply

logger = logging.getLogger(__name__)


class PostService:
    """Service class for posts and their comment threads."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, user_id: int, caption: Optional[str] = None, content: str = "") -> Post:
        post = Post(
            user_id=user_id,
            caption=caption or None,
            content=content or "",
        )
        self.session.add(post)
        self.session.commit()
        self.session.refresh(post)
        return post

    def list_posts(self) -> List[Post]:
        """All posts, newest first."""
        statement = select(Post).order_by(Post.created_at.desc(), Post.id.desc())
        return list(self.session.exec(statement).all())

    def get_by_id(self, post_id: int) -> Optional[Post]:
        return self.session.get(Post, post_id)

    def add_likes(self, post_id: int, delta: int) -> Optional[Post]:
        """Apply a like delta; the count never drops below zero."""
        post = self.get_by_id(post_id)
        if not post:
            return None

        post.likes = max(0, post.likes + delta)
        self.session.commit()
        self.session.refresh(post)
        return post

    def delete(self, post_id: int) -> bool:
        """Delete a post with its comments and replies."""
        post = self.get_by_id(post_id)
        if not post:
            return False

        self.session.delete(post)
        self.session.commit()
        logger.info("Deleted post %s", post_id)
        return True

    def add_comment(self, user_id: int, post_id: int, content: str) -> Optional[Comment]:
        """Comment on a post; None when the post does not exist."""
        if not self.get_by_id(post_id):
            return None

        comment = Comment(user_id=user_id, post_id=post_id, content=content.strip())
        self.session.add(comment)
        self.session.commit()
        self.session.refresh(comment)
        return comment

    def get_comments(self, post_id: int) -> List[Comment]:
        """Comments on a post, newest first."""
        statement = (
            select(Comment)
            .where(Comment.post_id == post_id)
            .order_by(Comment.created_at.desc(), Comment.id.desc())
        )
        return list(self.session.exec(statement).all())

    def add_reply(self, user_id: int, comment_id: int, content: str) -> Optional[Reply]:
        """Reply to a comment; None when the comment does not exist."""
        if not self.session.get(Comment, comment_id):
            return None

        reply = Reply(user_id=user_id, comment_id=comment_id, content=content.strip())
        self.session.add(reply)
        self.session.commit()
        self.session.refresh(reply)
        return reply

    def get_replies(self, comment_id: int) -> List[Reply]:
        """Replies to a comment, oldest first."""
        statement = (
            select(Reply)
            .where(Reply.comment_id == comment_id)
            .order_by(Reply.created_at.asc(), Reply.id.asc())
        )
        return list(self.session.exec(statement).all())

    def get_by_user(self, user_id: int) -> List[Post]:
        """The user's own posts, newest first."""
        statement = (
            select(Post)
            .where(Post.user_id == user_id)
            .order_by(Post.created_at.desc(), Post.id.desc())
        )
        return list(self.session.exec(statement).all())
