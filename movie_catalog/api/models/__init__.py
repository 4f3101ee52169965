"""
Pydantic schemas for API request/response validation.
"""

from movie_catalog.api.models.movie import MovieResponse, MovieList, SearchResponse

__all__ = [
    "MovieResponse",
    "MovieList",
    "SearchResponse",
]
