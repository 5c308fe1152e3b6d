"""User service for accounts, profiles and admin statistics."""
from sqlmodel import Session, select, func
from passlib.context import CryptContext
from datetime import datetime
from typing import List, Optional, Dict, Any
import logging

from pethub.models import User, Pet, Post, Shop
from pethub.utils.datetime_utils import to_naive_utc

logger = logging.getLogger(__name__)

# pbkdf2_sha256 for new hashes; bcrypt still verifies hashes imported from older deployments
pwd_context = CryptContext(schemes=["pbkdf2_sha256", "bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed_password: str) -> bool:
    if not password or not hashed_password:
        return False
    try:
        return pwd_context.verify(password, hashed_password)
    except (ValueError, TypeError):
        # Unknown or malformed hash
        return False


class UserService:
    """Service class for user accounts."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        statement = select(User).where(User.email == email.lower())
        return self.session.exec(statement).first()

    def create(
        self,
        full_name: str,
        email: str,
        password: str,
        gender: Optional[str] = None,
        birthdate: Optional[datetime] = None,
        profile_picture: Optional[str] = None,
        is_admin: bool = False
    ) -> User:
        """Create a user with a hashed password. Email is stored lower-cased."""
        user = User(
            full_name=full_name.strip(),
            email=email.strip().lower(),
            password=hash_password(password),
            gender=gender,
            birthdate=to_naive_utc(birthdate) if birthdate else None,
            profile_picture=profile_picture,
            is_admin=is_admin,
        )
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        logger.info("Created user %s", user.id)
        return user

    def authenticate(self, email: str, password: str) -> Optional[User]:
        """Return the user when the credentials match, otherwise None."""
        user = self.get_by_email(email)
        if not user or not verify_password(password, user.password):
            return None
        return user

    def update_profile(
        self,
        user_id: int,
        full_name: Optional[str] = None,
        gender: Optional[str] = None,
        birthdate: Optional[datetime] = None,
        profile_picture: Optional[str] = None
    ) -> Optional[User]:
        user = self.get_by_id(user_id)
        if not user:
            return None

        if full_name is not None:
            user.full_name = full_name.strip()
        if gender is not None:
            user.gender = gender
        if birthdate is not None:
            user.birthdate = to_naive_utc(birthdate)
        if profile_picture is not None:
            user.profile_picture = profile_picture

        self.session.commit()
        self.session.refresh(user)
        return user

    def list_users(self) -> List[User]:
        statement = select(User).order_by(User.id.asc())
        return list(self.session.exec(statement).all())

    def delete(self, user_id: int) -> bool:
        """Delete a user and everything they own."""
        user = self.get_by_id(user_id)
        if not user:
            return False

        self.session.delete(user)
        self.session.commit()
        logger.info("Deleted user %s", user_id)
        return True

    def get_stats(self) -> Dict[str, Any]:
        """Counts for the admin dashboard."""
        gender_rows = self.session.exec(
            select(User.gender, func.count(User.id)).group_by(User.gender)
        ).all()
        pet_type_rows = self.session.exec(
            select(Pet.type, func.count(Pet.id)).group_by(Pet.type)
        ).all()

        return {
            "user_gender_stats": [
                {"gender": gender, "count": count} for gender, count in gender_rows
            ],
            "pet_type_stats": [
                {"type": pet_type, "count": count} for pet_type, count in pet_type_rows
            ],
            "total_users": self.session.exec(select(func.count(User.id))).one(),
            "total_pets": self.session.exec(select(func.count(Pet.id))).one(),
            "total_posts": self.session.exec(select(func.count(Post.id))).one(),
            "total_shops": self.session.exec(select(func.count(Shop.id))).one(),
        }
