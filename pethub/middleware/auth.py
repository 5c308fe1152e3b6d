"""JWT authentication middleware for FastAPI."""
from fastapi import HTTPException, Depends, status, Request
from jose import jwt, JWTError, ExpiredSignatureError
from pydantic import BaseModel
from sqlmodel import Session
import logging
import os

from pethub.db.config import get_session
from pethub.models.user import User

logger = logging.getLogger(__name__)

JWT_SECRET = os.environ.get("JWT_SECRET", "changeme")
JWT_ALGORITHM = "HS256"
JWT_EXPIRE_HOURS = int(os.environ.get("JWT_EXPIRE_HOURS", "24"))


class CurrentUser(BaseModel):
    """User information resolved from the bearer token."""
    user_id: int
    is_admin: bool = False


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    request: Request,
    session: Session = Depends(get_session),
) -> CurrentUser:
    """
    Validate the JWT from the Authorization header and load its user.

    Args:
        request: FastAPI request object to extract Authorization header
        session: database session used to check the user still exists

    Returns:
        CurrentUser with user_id and the stored admin flag

    Raises:
        HTTPException: 401 if the header is missing, the token is invalid or
            expired, or the user no longer exists
    """
    auth_header = request.headers.get("authorization")
    if not auth_header or not auth_header.startswith("Bearer "):
        raise _unauthorized("No token provided")

    token = auth_header[7:]  # Remove "Bearer " prefix

    try:
        payload = jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except ExpiredSignatureError:
        raise _unauthorized("Token has expired")
    except JWTError as e:
        logger.debug("Rejected token: %s", e)
        raise _unauthorized("Invalid or expired token")

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise _unauthorized("Invalid token: missing user ID")

    user = session.get(User, user_id)
    if user is None:
        raise _unauthorized("User not found")

    return CurrentUser(user_id=user.id, is_admin=user.is_admin)


async def require_admin(
    current_user: CurrentUser = Depends(get_current_user),
) -> CurrentUser:
    """Allow only admins through; everyone else gets 403."""
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required"
        )
    return current_user
