"""
FastAPI dependency injection for the movie service.
"""

import logging

from movie_catalog.api.config import get_movies_data_path
from movie_catalog.core.catalog.service import MovieService

logger = logging.getLogger(__name__)


# Singleton movie service, loaded once per process
_movie_service: MovieService | None = None


def get_movie_service() -> MovieService:
    """Get or create singleton MovieService."""
    global _movie_service
    if _movie_service is None:
        data_path = get_movies_data_path()
        _movie_service = MovieService.from_path(data_path)
        if not _movie_service.load_result.ok:
            logger.warning(
                "Movie catalog not loaded from %s: %s",
                data_path,
                _movie_service.load_result.error,
            )
    return _movie_service
