from gym_api.db import models
from gym_api.services import accounts


def seed_user(SessionLocal, email="coach@gym.local", password="secret1", role=models.UserRole.coach, **extra):
    db = SessionLocal()
    user = accounts.create_user_account(
        db, name="Casey", email=email, password=password, role=role
    )
    for key, value in extra.items():
        setattr(user, key, value)
    db.commit()
    user_id = user.id
    db.close()
    return user_id


def test_login_returns_token_and_user(anonymous_client):
    client, SessionLocal = anonymous_client
    user_id = seed_user(SessionLocal)

    response = client.post(
        "/api/auth/login", json={"email": "Coach@gym.local", "password": "secret1"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["token"]
    assert body["user"] == {
        "id": user_id,
        "name": "Casey",
        "email": "coach@gym.local",
        "role": "coach",
    }


def test_login_with_wrong_password(anonymous_client):
    client, SessionLocal = anonymous_client
    seed_user(SessionLocal)

    response = client.post(
        "/api/auth/login", json={"email": "coach@gym.local", "password": "nope"}
    )

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid email or password"}


def test_inactive_user_cannot_login(anonymous_client):
    client, SessionLocal = anonymous_client
    seed_user(SessionLocal, is_active=False)

    response = client.post(
        "/api/auth/login", json={"email": "coach@gym.local", "password": "secret1"}
    )

    assert response.status_code == 401


def test_verify_token_round_trip(anonymous_client):
    client, SessionLocal = anonymous_client
    seed_user(SessionLocal)
    token = client.post(
        "/api/auth/login", json={"email": "coach@gym.local", "password": "secret1"}
    ).json()["token"]

    verified = client.get("/api/auth/verify", headers={"Authorization": f"Bearer {token}"})
    rejected = client.get("/api/auth/verify", headers={"Authorization": "Bearer garbage"})
    missing = client.get("/api/auth/verify")

    assert verified.status_code == 200
    assert verified.json()["valid"] is True
    assert verified.json()["user"]["email"] == "coach@gym.local"
    assert rejected.status_code == 401
    assert rejected.json() == {"error": "Could not validate credentials"}
    assert missing.status_code == 401


def test_role_gate_on_admin_routes(anonymous_client):
    client, SessionLocal = anonymous_client
    seed_user(SessionLocal, email="member@gym.local", role=models.UserRole.member)
    token = client.post(
        "/api/auth/login", json={"email": "member@gym.local", "password": "secret1"}
    ).json()["token"]
    headers = {"Authorization": f"Bearer {token}"}

    forbidden = client.post("/api/coaches", json={"name": "Alex"}, headers=headers)
    allowed = client.get("/api/coaches", headers=headers)

    assert forbidden.status_code == 403
    assert forbidden.json() == {"error": "Forbidden"}
    assert allowed.status_code == 200


def test_register_creates_member_account(anonymous_client):
    client, _ = anonymous_client

    created = client.post(
        "/api/auth/register",
        json={"name": "Robin", "email": "robin@gym.local", "password": "longpass"},
    )
    duplicate = client.post(
        "/api/auth/register",
        json={"name": "Robin", "email": "ROBIN@gym.local", "password": "longpass"},
    )
    short = client.post(
        "/api/auth/register",
        json={"name": "Kim", "email": "kim@gym.local", "password": "123"},
    )

    assert created.status_code == 201
    assert created.json()["role"] == "member"
    assert duplicate.status_code == 400
    assert duplicate.json() == {"error": "Email already registered"}
    assert short.status_code == 400


def test_health_and_logout(anonymous_client):
    client, _ = anonymous_client

    assert client.get("/api/health").json() == {"status": "ok"}
    assert client.post("/api/auth/logout").status_code == 200
