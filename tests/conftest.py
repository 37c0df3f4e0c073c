import os
import tempfile

# 앱 import 전에 테스트용 설정 주입
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="cinefav-uploads-")
os.environ["JWT_SECRET"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["API_URL"] = "http://testserver"
os.environ["TMDB_API_KEY"] = "server-key"
os.environ["LOG_LEVEL"] = "WARNING"

import httpx
import pytest
from fastapi.testclient import TestClient
from cinefav.main import app
from cinefav.database import Base, engine, init_db
from cinefav.client.config import ClientSettings


@pytest.fixture(scope="function", autouse=True)
def setup_test_db():
    init_db()  # 인메모리 SQLite 테이블 생성
    yield
    Base.metadata.drop_all(bind=engine)
    app.dependency_overrides.clear()


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def user_data():
    return {"name": "Alice", "email": "a@x.com", "password": "pw1"}


@pytest.fixture
def registered(client, user_data):
    response = client.post("/api/auth/register", json=user_data)
    assert response.status_code == 201
    return response.json()["data"]


@pytest.fixture
def auth_headers(registered):
    return {"Authorization": f"Bearer {registered['token']}"}


@pytest.fixture
def favorite_data():
    return {
        "movieId": 42,
        "title": "The Answer",
        "posterPath": "/answer.jpg",
        "overview": "Life, the universe and everything.",
    }


# TMDB 가짜 응답

GENRES = {"genres": [{"id": 28, "name": "Action"}, {"id": 35, "name": "Comedy"}]}


def make_movie(movie_id, title=None, genre_ids=(28,)):
    return {
        "id": movie_id,
        "title": title or f"Movie {movie_id}",
        "overview": f"Overview {movie_id}",
        "poster_path": f"/poster{movie_id}.jpg",
        "vote_average": 7.5,
        "release_date": "2024-01-01",
        "genre_ids": list(genre_ids),
    }


class FakeTMDB:
    """httpx.MockTransport 용 TMDB 흉내"""

    def __init__(self, pages=None, search_results=None, fail_paths=()):
        self.pages = pages or {}
        self.search_results = search_results or []
        self.fail_paths = set(fail_paths)
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.replace("/3", "", 1)
        language = request.url.params.get("language", "en-US")

        if path in self.fail_paths:
            return httpx.Response(500, json={"status_message": "Internal error"})
        if path == "/genre/movie/list":
            return httpx.Response(200, json=GENRES)
        if path == "/movie/popular":
            page = int(request.url.params.get("page", "1"))
            return httpx.Response(200, json={"page": page, "results": self.pages.get(page, [])})
        if path == "/search/movie":
            return httpx.Response(200, json={"page": 1, "results": self.search_results})
        if path.startswith("/movie/"):
            movie_id = int(path.rsplit("/", 1)[-1])
            if movie_id == 404:
                return httpx.Response(
                    404, json={"status_message": "The resource you requested could not be found."}
                )
            title = f"Filme {movie_id}" if language == "pt-BR" else f"Movie {movie_id}"
            return httpx.Response(
                200,
                json={
                    "id": movie_id,
                    "title": title,
                    "overview": f"Overview {movie_id} ({language})",
                    "poster_path": f"/poster{movie_id}.jpg",
                    "vote_average": 8.1,
                    "release_date": "2024-01-01",
                    "genres": [{"id": 28, "name": "Action"}],
                    "runtime": 120,
                    "tagline": "A tagline",
                },
            )
        return httpx.Response(404, json={"status_message": "Unknown path"})


@pytest.fixture
def fake_tmdb():
    return FakeTMDB(
        pages={1: [make_movie(1), make_movie(2, genre_ids=(35, 99))], 2: [make_movie(3)]},
        search_results=[make_movie(i, title=f"Star {i}") for i in range(10, 18)],
    )


@pytest.fixture
def client_settings(tmp_path):
    return ClientSettings(
        api_url="http://testserver/api",
        tmdb_api_key="client-key",
        tmdb_base_url="https://tmdb.test/3",
        storage_path=str(tmp_path / "storage.json"),
        search_debounce_seconds=0.05,
        search_preview_limit=5,
    )


@pytest.fixture
def api_transport():
    return httpx.ASGITransport(app=app)
