"""Create (or promote) an admin account.

Usage: python -m pethub.db.create_admin <email> <password> [full name]
"""
import sys
from sqlmodel import Session

from pethub.db.config import engine
from pethub.db.init import init_db
from pethub.services.user_service import UserService


def create_admin(email: str, password: str, full_name: str = "Admin"):
    """Create an admin user, or promote the existing account with that email."""
    init_db()
    with Session(engine) as session:
        service = UserService(session)
        user = service.get_by_email(email)
        if user:
            user.is_admin = True
            session.commit()
            session.refresh(user)
            return user
        return service.create(full_name=full_name, email=email, password=password, is_admin=True)


if __name__ == "__main__":
    if len(sys.argv) < 3:
        print(__doc__)
        sys.exit(1)
    admin = create_admin(sys.argv[1], sys.argv[2], " ".join(sys.argv[3:]) or "Admin")
    print(f"Admin ready: {admin.email} (id {admin.id})")
