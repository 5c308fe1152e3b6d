"""Authentication router for PetHub."""
from fastapi import APIRouter, Depends, HTTPException, status
from datetime import timedelta
from jose import jwt
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session
import logging

from pethub.schemas.auth import RegisterRequest, LoginRequest, TokenResponse, AuthUser
from pethub.db.config import get_session
from pethub.middleware.auth import JWT_SECRET, JWT_ALGORITHM, JWT_EXPIRE_HOURS
from pethub.models.user import User
from pethub.services.user_service import UserService
from pethub.utils.datetime_utils import utcnow

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])


def create_jwt_token(user_id: int, is_admin: bool, expires_in: timedelta = None) -> str:
    now = utcnow()
    expire = now + (expires_in or timedelta(hours=JWT_EXPIRE_HOURS))
    payload = {
        "sub": str(user_id),
        "is_admin": is_admin,
        "exp": expire,
        "iat": now,
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)


def _token_response(user: User) -> TokenResponse:
    return TokenResponse(
        token=create_jwt_token(user.id, user.is_admin),
        is_admin=user.is_admin,
        user=AuthUser(
            id=user.id,
            full_name=user.full_name,
            email=user.email,
            profile_picture=user.profile_picture,
        ),
    )


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest, session: Session = Depends(get_session)):
    service = UserService(session)
    if service.get_by_email(request.email):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User with this email already exists"
        )

    try:
        user = service.create(
            full_name=request.full_name,
            email=request.email,
            password=request.password,
            gender=request.gender,
            birthdate=request.birthdate,
            profile_picture=request.profile_picture,
        )
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("Registration failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create user: {str(e)}"
        )

    return _token_response(user)


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest, session: Session = Depends(get_session)):
    user = UserService(session).authenticate(request.email, request.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password"
        )
    return _token_response(user)
