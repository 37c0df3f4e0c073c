from datetime import timedelta
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from jose import jwt
from cinefav.core.auth import (
    create_access_token,
    create_user_token,
    get_password_hash,
    verify_password,
    verify_token,
)
from cinefav.core.config import Settings
from cinefav.core.exceptions import (
    AppError,
    ConflictError,
    NotFoundError,
    UpstreamError,
    register_exception_handlers,
)


def test_health_check(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_settings_defaults():
    fields = Settings.model_fields
    assert fields["port"].default == 3000
    assert fields["bcrypt_rounds"].default == 12
    assert fields["access_token_expire_minutes"].default == 60 * 24 * 30
    assert fields["max_upload_size"].default == 5 * 1024 * 1024


def test_tmdb_headers_with_access_token():
    settings = Settings(tmdb_access_token="abc")
    assert settings.tmdb_headers["Authorization"] == "Bearer abc"
    assert "Authorization" not in Settings(tmdb_access_token=None).tmdb_headers


# PASSWORD / TOKEN TESTS
def test_password_hash_roundtrip():
    hashed = get_password_hash("pw1")

    assert hashed != "pw1"
    assert verify_password("pw1", hashed)
    assert not verify_password("pw2", hashed)


def test_user_token_claims():
    token = create_user_token(7, "a@x.com")
    payload = jwt.decode(token, "test-secret", algorithms=["HS256"])

    assert payload["id"] == 7
    assert payload["email"] == "a@x.com"
    assert "exp" in payload
    assert verify_token(token) == {"id": 7, "email": "a@x.com"}


@pytest.mark.parametrize(
    "token",
    [
        "garbage",
        jwt.encode({"id": 7, "email": "a@x.com"}, "other-secret", algorithm="HS256"),
        create_access_token({"id": 7, "email": "a@x.com"}, expires_delta=timedelta(minutes=-5)),
        create_access_token({"email": "a@x.com"}),
    ],
)
def test_verify_token_rejects(token):
    assert verify_token(token) is None


# ERROR HANDLER TESTS
@pytest.fixture
def error_client():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/conflict")
    def conflict():
        raise ConflictError("Already there")

    @app.get("/missing")
    def missing():
        raise NotFoundError()

    @app.get("/upstream")
    def upstream():
        raise UpstreamError("Teapot upstream", status_code=418)

    @app.get("/generic")
    def generic():
        raise AppError()

    @app.get("/boom")
    def boom():
        raise RuntimeError("kaboom")

    return TestClient(app, raise_server_exceptions=False)


def test_error_envelopes(error_client):
    assert error_client.get("/conflict").status_code == 400
    assert error_client.get("/conflict").json() == {"status": "error", "message": "Already there"}

    assert error_client.get("/missing").status_code == 404
    assert error_client.get("/missing").json()["message"] == "Resource not found"

    assert error_client.get("/upstream").status_code == 418
    assert error_client.get("/generic").status_code == 500
    assert error_client.get("/generic").json()["message"] == "Something went wrong"


def test_unhandled_error_hides_details(error_client):
    response = error_client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"status": "error", "message": "Something went wrong"}
