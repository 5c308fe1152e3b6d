import os

import pytest

# Set up test environment variables before anything imports the app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test_secret_key_12345"
os.environ["ENVIRONMENT"] = "testing"

from fastapi.testclient import TestClient
from sqlmodel import Session

from pethub.db.config import engine
from pethub.db.init import init_db, drop_db
from pethub.main import app
from pethub.routers.auth import create_jwt_token
from pethub.services.user_service import UserService


@pytest.fixture(autouse=True)
def clean_db():
    """Recreate every table so each test starts from an empty database."""
    drop_db()
    init_db()
    yield
    drop_db()


@pytest.fixture
def session():
    with Session(engine) as db:
        yield db


@pytest.fixture
def client():
    return TestClient(app)


def _make_user(session, email, is_admin=False, **extra):
    return UserService(session).create(
        full_name=extra.pop("full_name", "Test Owner"),
        email=email,
        password="secret123",
        is_admin=is_admin,
        **extra,
    )


@pytest.fixture
def test_user(session):
    return _make_user(session, "owner@pethub.io", gender="female")


@pytest.fixture
def other_user(session):
    return _make_user(session, "other@pethub.io", full_name="Other Owner", gender="male")


@pytest.fixture
def admin_user(session):
    return _make_user(session, "admin@pethub.io", is_admin=True, full_name="Admin")


@pytest.fixture
def auth_headers(test_user):
    return {"Authorization": f"Bearer {create_jwt_token(test_user.id, test_user.is_admin)}"}


@pytest.fixture
def other_auth_headers(other_user):
    return {"Authorization": f"Bearer {create_jwt_token(other_user.id, other_user.is_admin)}"}


@pytest.fixture
def admin_headers(admin_user):
    return {"Authorization": f"Bearer {create_jwt_token(admin_user.id, admin_user.is_admin)}"}


@pytest.fixture
def pet(client, auth_headers):
    resp = client.post("/pet", json={"name": "Rex", "type": "dog", "breed": "Beagle", "age": 3}, headers=auth_headers)
    assert resp.status_code == 201
    return resp.json()
