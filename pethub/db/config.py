"""Database configuration for the PetHub backend."""
from typing import Generator
from sqlmodel import create_engine, Session
from sqlalchemy import event
from sqlalchemy.pool import StaticPool
from dotenv import load_dotenv
import logging
import os

load_dotenv()

logger = logging.getLogger(__name__)

# Use the DATABASE_URL from environment variable, with fallback to SQLite for local dev
DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./pethub.db")
IS_SQLITE = DATABASE_URL.startswith("sqlite")

if IS_SQLITE:
    logger.info("[DB CONFIG] Using SQLite database: %s", DATABASE_URL)
else:
    logger.info("[DB CONFIG] Using PostgreSQL database")

connect_args = {"check_same_thread": False} if IS_SQLITE else {}

if IS_SQLITE:
    # In-memory databases live inside a single connection
    if DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
        engine = create_engine(
            DATABASE_URL, echo=False, connect_args=connect_args, poolclass=StaticPool
        )
    else:
        engine = create_engine(DATABASE_URL, echo=False, connect_args=connect_args)

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
else:
    engine = create_engine(DATABASE_URL, echo=False, pool_pre_ping=True)


def get_session() -> Generator[Session, None, None]:
    """Dependency for getting database sessions."""
    with Session(engine) as session:
        yield session
