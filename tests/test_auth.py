from pathlib import Path
from sqlalchemy import func, select
from cinefav.core.auth import verify_token
from cinefav.core.config import get_settings
from cinefav.database import SessionLocal
from cinefav.models import UserModel
from cinefav.services.user_service import UserService


def count_users():
    with SessionLocal() as db:
        return db.execute(select(func.count()).select_from(UserModel)).scalar_one()


# REGISTER TESTS
def test_register_success(client, user_data):
    response = client.post("/api/auth/register", json=user_data)

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "success"
    assert body["data"]["user"]["name"] == "Alice"
    assert body["data"]["user"]["email"] == "a@x.com"
    assert body["data"]["user"]["photoUrl"] is None
    assert "password" not in body["data"]["user"]
    assert "passwordHash" not in body["data"]["user"]

    claims = verify_token(body["data"]["token"])
    assert claims == {"id": body["data"]["user"]["id"], "email": "a@x.com"}


def test_register_stores_hashed_password(client, user_data):
    client.post("/api/auth/register", json=user_data)

    with SessionLocal() as db:
        user = db.execute(select(UserModel)).scalar_one()
    assert user.password_hash != user_data["password"]
    assert user.password_hash.startswith("$2")


def test_register_duplicate_email(client, user_data):
    client.post("/api/auth/register", json=user_data)

    response = client.post("/api/auth/register", json={**user_data, "name": "Other"})
    assert response.status_code == 400
    assert response.json() == {"status": "error", "message": "User already exists with this email"}
    assert count_users() == 1


def test_register_duplicate_caught_by_unique_constraint(client, user_data, monkeypatch):
    client.post("/api/auth/register", json=user_data)
    # 동시 가입: 사전 중복 체크를 통과한 두 번째 요청
    monkeypatch.setattr(UserService, "_get_model_by_email", lambda self, email: None)

    response = client.post("/api/auth/register", json=user_data)
    assert response.status_code == 400
    assert response.json() == {"status": "error", "message": "User already exists with this email"}
    assert count_users() == 1


def test_register_missing_field(client):
    response = client.post("/api/auth/register", json={"email": "a@x.com", "password": "pw1"})

    assert response.status_code == 400
    assert response.json()["status"] == "error"
    assert "name" in response.json()["message"]
    assert count_users() == 0


# LOGIN TESTS
def test_login_success(client, registered, user_data):
    response = client.post(
        "/api/auth/login", json={"email": user_data["email"], "password": user_data["password"]}
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["user"]["id"] == registered["user"]["id"]
    assert verify_token(data["token"])["email"] == "a@x.com"


def test_login_wrong_password_and_unknown_email_look_the_same(client, registered):
    wrong_password = client.post("/api/auth/login", json={"email": "a@x.com", "password": "nope"})
    unknown_email = client.post("/api/auth/login", json={"email": "b@x.com", "password": "pw1"})

    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()
    assert wrong_password.json()["message"] == "Invalid email or password"


# UPDATE PHOTO TESTS
def test_update_photo_requires_token(client):
    response = client.post(
        "/api/auth/update-photo", files={"photo": ("me.png", b"\x89PNG data", "image/png")}
    )

    assert response.status_code == 401
    assert response.json()["message"] == "You are not logged in. Please log in to get access."


def test_update_photo_without_file(client, auth_headers):
    response = client.post("/api/auth/update-photo", headers=auth_headers)

    assert response.status_code == 400
    assert response.json()["message"] == "No photo uploaded"


def test_update_photo_rejects_non_image(client, auth_headers):
    response = client.post(
        "/api/auth/update-photo",
        headers=auth_headers,
        files={"photo": ("notes.txt", b"hello", "text/plain")},
    )

    assert response.status_code == 415


def test_update_photo_rejects_large_file(client, auth_headers):
    too_big = b"0" * (get_settings().max_upload_size + 1)
    response = client.post(
        "/api/auth/update-photo",
        headers=auth_headers,
        files={"photo": ("big.jpg", too_big, "image/jpeg")},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "File too large. Maximum size is 5MB."


def test_update_photo_accepts_file_at_size_limit(client, auth_headers):
    exact = b"0" * get_settings().max_upload_size
    response = client.post(
        "/api/auth/update-photo",
        headers=auth_headers,
        files={"photo": ("limit.jpg", exact, "image/jpeg")},
    )

    assert response.status_code == 200
    filename = response.json()["data"]["user"]["photoUrl"].rsplit("/", 1)[-1]
    assert (Path(get_settings().upload_dir) / filename).stat().st_size == len(exact)


def test_update_photo_success(client, auth_headers, registered):
    response = client.post(
        "/api/auth/update-photo",
        headers=auth_headers,
        files={"photo": ("Me.PNG", b"\x89PNG data", "image/png")},
    )

    assert response.status_code == 200
    user = response.json()["data"]["user"]
    assert user["id"] == registered["user"]["id"]
    assert user["photoUrl"].startswith("http://testserver/uploads/")
    assert user["photoUrl"].endswith(".png")

    filename = user["photoUrl"].rsplit("/", 1)[-1]
    assert (Path(get_settings().upload_dir) / filename).read_bytes() == b"\x89PNG data"

    # 저장된 사진은 /uploads 에서 바로 내려받을 수 있다
    served = client.get(f"/uploads/{filename}")
    assert served.status_code == 200
    assert served.content == b"\x89PNG data"


def test_update_photo_for_deleted_user(client, auth_headers):
    with SessionLocal() as db:
        db.query(UserModel).delete()
        db.commit()

    response = client.post(
        "/api/auth/update-photo",
        headers=auth_headers,
        files={"photo": ("me.png", b"\x89PNG data", "image/png")},
    )
    assert response.status_code == 404
