import pytest
from fastapi.testclient import TestClient

from habit_tracker.config import Settings
from habit_tracker.database import Database
from habit_tracker.main import create_app
from habit_tracker.models import User


@pytest.fixture
def settings():
    return Settings(database_url="sqlite://", secret_key="test-secret", bcrypt_rounds=4)


@pytest.fixture
def database(settings):
    db = Database(settings.database_url)
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def session(database):
    with database.session() as session:
        yield session


@pytest.fixture
def app(settings, database):
    return create_app(settings, database)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


def register(client, email="habit-user@example.com", password="password123", name="Habit User"):
    return client.post("/auth/register", json={"email": email, "password": password, "name": name})


@pytest.fixture
def auth_headers(client):
    """Register a user and return headers carrying their bearer token."""
    response = register(client)
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def other_headers(client):
    response = register(client, email="someone-else@example.com", name="Someone Else")
    assert response.status_code == 201
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def user(session):
    user = User(email="service-user@example.com", name="Service User", password_hash="x")
    session.add(user)
    session.commit()
    session.refresh(user)
    return user
