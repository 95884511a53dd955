"""Pytest configuration and fixtures."""

import os

# La configuration est lue à l'import: base SQLite en mémoire et bcrypt rapide
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["DEFAULT_ADMIN_EMAIL"] = "admin@example.com"
os.environ["DEFAULT_ADMIN_PASSWORD"] = "admin"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

import models  # noqa: E402,F401
from app_factory import create_app, seed_database  # noqa: E402
from database import Base, SessionLocal, engine  # noqa: E402
from dependencies import create_access_token  # noqa: E402

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin"


@pytest.fixture(autouse=True)
def reset_database():
    """Recrée un schéma vide avec les rôles et l'admin par défaut pour chaque test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    seed_database()
    yield


@pytest.fixture
def db_session():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    with TestClient(create_app()) as test_client:
        yield test_client


def _bearer(email: str) -> dict:
    return {"Authorization": f"Bearer {create_access_token({'sub': email})}"}


@pytest.fixture
def bearer():
    """En-têtes d'authentification pour l'email donné."""
    return _bearer


@pytest.fixture
def admin_headers():
    return _bearer(ADMIN_EMAIL)


@pytest.fixture
def register(client):
    """Inscrit un utilisateur via l'API et retourne la réponse JSON."""
    def _register(email="jane@example.com", password="secret", status="active", **extra):
        payload = {
            "email": email,
            "firstName": "Jane",
            "lastName": "Doe",
            "password": password,
            "status": status,
        }
        payload.update(extra)
        response = client.post("/users/register", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    return _register
