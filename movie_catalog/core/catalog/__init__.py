"""
In-memory movie catalog.

This package contains:
- The Movie record model
- Dataset loading with a fail-open LoadResult
- The id-indexed catalog store
- The multi-criteria query engine
- The MovieService facade used by the API
"""

from movie_catalog.core.catalog.models import Movie
from movie_catalog.core.catalog.loader import LoadResult, file_reader, load_all, parse_movies
from movie_catalog.core.catalog.store import CatalogStore, new_catalog_store
from movie_catalog.core.catalog.query import QueryEngine, has_valid_criteria
from movie_catalog.core.catalog.service import MovieService

__all__ = [
    'Movie',
    'LoadResult',
    'file_reader',
    'load_all',
    'parse_movies',
    'CatalogStore',
    'new_catalog_store',
    'QueryEngine',
    'has_valid_criteria',
    'MovieService',
]
