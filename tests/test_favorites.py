from datetime import timedelta
from sqlalchemy import func, select
from cinefav.core.auth import create_access_token, create_user_token
from cinefav.database import SessionLocal
from cinefav.models import UserMovieModel


def count_favorites():
    with SessionLocal() as db:
        return db.execute(select(func.count()).select_from(UserMovieModel)).scalar_one()


def favorite(movie_id, title=None):
    return {"movieId": movie_id, "title": title or f"Movie {movie_id}"}


# LIST / ADD TESTS
def test_list_favorites_empty(client, auth_headers):
    response = client.get("/api/movies/favorites", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"status": "success", "data": {"favorites": []}}


def test_add_favorite(client, auth_headers, registered, favorite_data):
    response = client.post("/api/movies/favorites", headers=auth_headers, json=favorite_data)

    assert response.status_code == 201
    created = response.json()["data"]["favorite"]
    assert created["userId"] == registered["user"]["id"]
    assert created["movieId"] == 42
    assert created["title"] == "The Answer"
    assert created["posterPath"] == "/answer.jpg"
    assert created["overview"] == "Life, the universe and everything."
    assert created["createdAt"] is not None


def test_add_favorite_minimal_fields(client, auth_headers):
    response = client.post("/api/movies/favorites", headers=auth_headers, json=favorite(7))

    assert response.status_code == 201
    created = response.json()["data"]["favorite"]
    assert created["posterPath"] is None
    assert created["overview"] is None


def test_add_favorite_missing_title(client, auth_headers):
    response = client.post("/api/movies/favorites", headers=auth_headers, json={"movieId": 7})

    assert response.status_code == 400
    assert response.json()["status"] == "error"
    assert count_favorites() == 0


def test_add_duplicate_favorite(client, auth_headers, favorite_data):
    client.post("/api/movies/favorites", headers=auth_headers, json=favorite_data)

    response = client.post("/api/movies/favorites", headers=auth_headers, json=favorite_data)
    assert response.status_code == 400
    assert response.json() == {"status": "error", "message": "Movie already in favorites"}
    assert count_favorites() == 1


def test_list_favorites_newest_first(client, auth_headers):
    for movie_id in (1, 2, 3):
        client.post("/api/movies/favorites", headers=auth_headers, json=favorite(movie_id))

    response = client.get("/api/movies/favorites", headers=auth_headers)
    movie_ids = [fav["movieId"] for fav in response.json()["data"]["favorites"]]
    assert movie_ids == [3, 2, 1]


def test_favorites_are_scoped_per_user(client, auth_headers):
    client.post("/api/movies/favorites", headers=auth_headers, json=favorite(42))

    other = client.post(
        "/api/auth/register", json={"name": "Bob", "email": "b@x.com", "password": "pw2"}
    ).json()["data"]
    other_headers = {"Authorization": f"Bearer {other['token']}"}

    assert client.get("/api/movies/favorites", headers=other_headers).json()["data"]["favorites"] == []
    check = client.get("/api/movies/favorites/42", headers=other_headers)
    assert check.json()["data"] == {"isFavorite": False}

    # 다른 사용자도 같은 영화를 추가할 수 있다
    response = client.post("/api/movies/favorites", headers=other_headers, json=favorite(42))
    assert response.status_code == 201
    assert count_favorites() == 2


# REMOVE / CHECK TESTS
def test_remove_favorite(client, auth_headers, favorite_data):
    client.post("/api/movies/favorites", headers=auth_headers, json=favorite_data)

    response = client.delete("/api/movies/favorites/42", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"status": "success", "data": None}
    assert count_favorites() == 0


def test_remove_missing_favorite(client, auth_headers):
    client.post("/api/movies/favorites", headers=auth_headers, json=favorite(1))

    response = client.delete("/api/movies/favorites/99", headers=auth_headers)
    assert response.status_code == 404
    assert response.json() == {"status": "error", "message": "Movie not found in favorites"}
    assert count_favorites() == 1


def test_check_favorite(client, auth_headers, favorite_data):
    before = client.get("/api/movies/favorites/42", headers=auth_headers)
    assert before.status_code == 200
    assert before.json() == {"status": "success", "data": {"isFavorite": False}}

    client.post("/api/movies/favorites", headers=auth_headers, json=favorite_data)
    after = client.get("/api/movies/favorites/42", headers=auth_headers)
    assert after.json()["data"]["isFavorite"] is True


# AUTHENTICATION TESTS
def test_favorites_require_token(client, favorite_data):
    for method, path in (
        ("GET", "/api/movies/favorites"),
        ("POST", "/api/movies/favorites"),
        ("DELETE", "/api/movies/favorites/42"),
        ("GET", "/api/movies/favorites/42"),
    ):
        response = client.request(method, path, json=favorite_data if method == "POST" else None)
        assert response.status_code == 401
        assert response.json() == {
            "status": "error",
            "message": "You are not logged in. Please log in to get access.",
        }
    assert count_favorites() == 0


def test_favorites_reject_invalid_token(client, favorite_data):
    headers = {"Authorization": "Bearer not-a-token"}

    response = client.post("/api/movies/favorites", headers=headers, json=favorite_data)
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token. Please log in again."
    assert count_favorites() == 0


def test_favorites_reject_expired_token(client, registered):
    token = create_access_token(
        {"id": registered["user"]["id"], "email": "a@x.com"}, expires_delta=timedelta(seconds=-1)
    )

    response = client.get("/api/movies/favorites", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token. Please log in again."


def test_token_is_trusted_without_user_lookup(client, registered):
    # 토큰 claims 만으로 사용자를 식별한다
    token = create_user_token(registered["user"]["id"], "a@x.com")

    response = client.get("/api/movies/favorites", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 200


# END TO END
def test_register_login_favorite_flow(client):
    register = client.post(
        "/api/auth/register", json={"name": "Alice", "email": "a@x.com", "password": "pw1"}
    )
    assert register.status_code == 201
    token = register.json()["data"]["token"]
    headers = {"Authorization": f"Bearer {token}"}

    login = client.post("/api/auth/login", json={"email": "a@x.com", "password": "pw1"})
    assert login.status_code == 200

    added = client.post("/api/movies/favorites", headers=headers, json={"movieId": 42, "title": "X"})
    assert added.status_code == 201

    listed = client.get("/api/movies/favorites", headers=headers).json()["data"]["favorites"]
    assert [(fav["movieId"], fav["title"]) for fav in listed] == [(42, "X")]

    assert client.get("/api/movies/favorites/42", headers=headers).json()["data"]["isFavorite"] is True

    assert client.delete("/api/movies/favorites/42", headers=headers).status_code == 200
    assert client.get("/api/movies/favorites/42", headers=headers).json()["data"]["isFavorite"] is False
    assert client.delete("/api/movies/favorites/42", headers=headers).status_code == 404
