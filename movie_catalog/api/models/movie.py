"""
Pydantic schemas for Movie API.
"""

from typing import Any

from pydantic import BaseModel


class MovieResponse(BaseModel):
    """Response model for a single movie."""

    id: int
    title: str
    director: str
    year: int
    genre: str
    description: str
    duration_minutes: int
    rating: float

    class Config:
        from_attributes = True


class MovieList(BaseModel):
    """Response model for list of movies with total count."""

    movies: list[MovieResponse]
    total: int


class SearchResponse(BaseModel):
    """Envelope for multi-criteria search results."""

    success: bool
    message: str
    total_results: int = 0
    results: list[MovieResponse] = []
    search_parameters: dict[str, Any] | None = None
    error: str | None = None
