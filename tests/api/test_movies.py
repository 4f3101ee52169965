"""
API tests for movie endpoints.

Uses FastAPI TestClient against the real app and the bundled dataset.
"""

import pytest
from fastapi.testclient import TestClient

from movie_catalog.api.main import app
from movie_catalog.api.dependencies import get_movie_service
from movie_catalog.core.catalog import MovieService

client = TestClient(app)


class TestListAndDetails:
    """Tests for GET /api/movies and GET /api/movies/{movie_id}."""

    def test_list_movies(self):
        """GET /api/movies returns every movie with a total."""
        r = client.get("/api/movies")
        assert r.status_code == 200
        data = r.json()
        assert data["total"] == len(data["movies"])
        assert data["total"] >= 12
        first = data["movies"][0]
        for key in ("id", "title", "director", "year", "genre", "description",
                    "duration_minutes", "rating"):
            assert key in first

    def test_get_movie(self):
        """GET /api/movies/{id} returns the movie."""
        r = client.get("/api/movies/1")
        assert r.status_code == 200
        data = r.json()
        assert data["id"] == 1
        assert data["title"] == "The Prison Escape"

    def test_get_movie_not_found(self):
        """GET /api/movies/{id} returns 404 for unknown ids."""
        r = client.get("/api/movies/999")
        assert r.status_code == 404
        assert "not found" in r.json()["detail"].lower()

    def test_get_movie_non_positive(self):
        r = client.get("/api/movies/0")
        assert r.status_code == 404


class TestSearchEndpoint:
    """Tests for GET /api/movies/search."""

    def test_search_by_name(self):
        r = client.get("/api/movies/search", params={"name": "prison"})
        assert r.status_code == 200
        data = r.json()
        assert data["success"] is True
        assert data["total_results"] == 1
        assert data["results"][0]["id"] == 1
        assert data["message"] == "Found 1 movie matching your search."
        assert data["search_parameters"] == {"name": "prison", "id": None, "genre": None}

    def test_search_by_id(self):
        r = client.get("/api/movies/search", params={"id": 2})
        assert r.status_code == 200
        assert [m["id"] for m in r.json()["results"]] == [2]

    def test_search_combined(self):
        r = client.get("/api/movies/search", params={"name": "the", "genre": "crime"})
        assert r.status_code == 200
        data = r.json()
        assert data["total_results"] == len(data["results"])
        for movie in data["results"]:
            assert "the" in movie["title"].lower()
            assert "crime" in movie["genre"].lower()

    def test_search_plural_message(self):
        r = client.get("/api/movies/search", params={"genre": "drama"})
        data = r.json()
        assert data["total_results"] > 1
        assert data["message"] == f"Found {data['total_results']} movies matching your search."

    def test_search_no_results(self):
        r = client.get("/api/movies/search", params={"id": 999})
        assert r.status_code == 200
        data = r.json()
        assert data["success"] is True
        assert data["results"] == []
        assert "no movies found" in data["message"].lower()

    @pytest.mark.parametrize("params", [
        {},
        {"name": "   "},
        {"id": 0},
        {"id": -1, "genre": ""},
    ])
    def test_search_without_valid_parameters(self, params):
        """Requests without a usable criterion are rejected with 400."""
        r = client.get("/api/movies/search", params=params)
        assert r.status_code == 400
        data = r.json()
        assert data["success"] is False
        assert data["results"] == []
        assert "at least one search parameter" in data["message"]

    def test_search_invalid_id_type(self):
        r = client.get("/api/movies/search", params={"id": "abc"})
        assert r.status_code == 422

    def test_search_internal_error(self):
        """Unexpected failures are reported as a 500 envelope."""
        class BrokenService(MovieService):
            def search_movies(self, name=None, movie_id=None, genre=None):
                raise RuntimeError("boom")

        broken = BrokenService.from_reader(lambda: "[]")
        app.dependency_overrides[get_movie_service] = lambda: broken
        try:
            r = client.get("/api/movies/search", params={"name": "x"})
        finally:
            app.dependency_overrides.clear()

        assert r.status_code == 500
        data = r.json()
        assert data["success"] is False
        assert data["error"] == "boom"


class TestSingleFieldEndpoints:
    """Tests for /api/movies/search/by-name and /by-genre."""

    def test_by_name(self):
        r = client.get("/api/movies/search/by-name", params={"name": "FAMILY"})
        assert r.status_code == 200
        data = r.json()
        assert data["total"] == 1
        assert data["movies"][0]["title"] == "The Family Boss"

    def test_by_genre(self):
        r = client.get("/api/movies/search/by-genre", params={"genre": "crime"})
        ids = [m["id"] for m in r.json()["movies"]]
        assert 2 in ids
        assert 1 not in ids

    @pytest.mark.parametrize("path, param", [
        ("/api/movies/search/by-name", "name"),
        ("/api/movies/search/by-genre", "genre"),
    ])
    def test_blank_input_returns_empty(self, path, param):
        r = client.get(path, params={param: "  "})
        assert r.status_code == 200
        assert r.json() == {"movies": [], "total": 0}
        assert client.get(path).json()["total"] == 0
