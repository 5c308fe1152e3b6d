"""Initialize database tables."""
from sqlmodel import SQLModel
import logging

from pethub.models import User, Pet, Task, MedicalRecord, Post, Comment, Reply, Shop  # noqa: F401
from pethub.db.config import engine

logger = logging.getLogger(__name__)


def init_db():
    """Create all tables in the database."""
    logger.info("[DB INIT] Creating all tables...")
    SQLModel.metadata.create_all(engine)
    logger.info("[DB INIT] Tables created successfully.")


def drop_db():
    """Drop every table. Used by the test suite and local resets."""
    SQLModel.metadata.drop_all(engine)


if __name__ == "__main__":
    init_db()
    print("Database tables created successfully.")
