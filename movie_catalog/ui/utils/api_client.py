"""
FastAPI client wrapper for Streamlit UI.
"""

import os
import requests


def get_api_base_url() -> str:
    """Get API base URL from env or default."""
    return os.getenv("API_BASE_URL", "http://localhost:8000").rstrip("/")


def list_movies() -> dict:
    """Get every movie in the catalog."""
    r = requests.get(f"{get_api_base_url()}/api/movies", timeout=10)
    r.raise_for_status()
    return r.json()


def get_movie(movie_id: int) -> dict | None:
    """Get movie details, or None if the movie does not exist."""
    r = requests.get(f"{get_api_base_url()}/api/movies/{movie_id}", timeout=10)
    if r.status_code == 404:
        return None
    r.raise_for_status()
    return r.json()


def search_movies(
    name: str | None = None,
    movie_id: int | None = None,
    genre: str | None = None,
) -> dict:
    """
    Search movies by name, id and genre.

    Returns the search envelope for both 200 and 400 responses so the
    caller can show the API's message.
    """
    params = {"name": name, "id": movie_id, "genre": genre}
    r = requests.get(
        f"{get_api_base_url()}/api/movies/search",
        params={k: v for k, v in params.items() if v not in (None, "")},
        timeout=10,
    )
    if r.status_code != 400:
        r.raise_for_status()
    return r.json()


def health_check() -> dict:
    """Check API health."""
    r = requests.get(f"{get_api_base_url()}/api/health", timeout=5)
    r.raise_for_status()
    return r.json()
