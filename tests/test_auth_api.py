from datetime import timedelta

from jose import jwt

from config import ALGORITHM, SECRET_KEY
from dependencies import create_access_token, has_role
import models


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "message" in response.json()


def test_login_returns_token_and_user(client, register):
    register(email="login@b.com", password="pw")

    response = client.post("/auth/login", data={"username": "Login@B.com", "password": "pw"})
    assert response.status_code == 200
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["email"] == "login@b.com"

    payload = jwt.decode(body["access_token"], SECRET_KEY, algorithms=[ALGORITHM])
    assert payload["sub"] == "login@b.com"

    me = client.get("/auth/me", headers={"Authorization": f"Bearer {body['access_token']}"})
    assert me.status_code == 200
    assert me.json()["email"] == "login@b.com"


def test_login_default_admin(client):
    response = client.post("/auth/login", data={"username": "admin@example.com", "password": "admin"})
    assert response.status_code == 200
    assert response.json()["user"]["role"]["name"] == "ADMIN"


def test_login_wrong_password(client, register):
    register(email="login@b.com", password="pw")
    response = client.post("/auth/login", data={"username": "login@b.com", "password": "nope"})
    assert response.status_code == 401


def test_login_unknown_user(client):
    response = client.post("/auth/login", data={"username": "ghost@b.com", "password": "pw"})
    assert response.status_code == 401


def test_login_inactive_account(client, register):
    register(email="sleepy@b.com", password="pw", status="inactive")
    response = client.post("/auth/login", data={"username": "sleepy@b.com", "password": "pw"})
    assert response.status_code == 403


def test_me_requires_valid_token(client, bearer):
    assert client.get("/auth/me").status_code == 401
    assert client.get("/auth/me", headers={"Authorization": "Bearer garbage"}).status_code == 401
    # token valide mais utilisateur inconnu
    assert client.get("/auth/me", headers=bearer("ghost@b.com")).status_code == 401


def test_expired_token_rejected(client):
    token = create_access_token({"sub": "admin@example.com"}, expires_delta=timedelta(minutes=-5))
    response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_has_role_policy():
    admin = models.User(email="a@b.com", role=models.Role(name="ADMIN"))
    plain = models.User(email="p@b.com", role=models.Role(name="USER"))
    nobody = models.User(email="n@b.com")

    assert has_role(admin, "ADMIN")
    assert has_role(admin, "admin")
    assert not has_role(plain, "ADMIN")
    assert not has_role(nobody, "ADMIN")
    assert not has_role(None, "ADMIN")
