"""
Movie service: the query surface used by the API and view layers.

Combines the catalog store and the query engine behind six read-only
operations.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from movie_catalog.core.catalog.loader import LoadResult, ResourceReader, file_reader
from movie_catalog.core.catalog.models import Movie
from movie_catalog.core.catalog.query import QueryEngine, has_valid_criteria
from movie_catalog.core.catalog.store import CatalogStore, new_catalog_store

logger = logging.getLogger(__name__)


class MovieService:
    """
    Read-only movie catalog service.

    Usage:
        service = MovieService.from_path("data/movies.json")
        if service.has_valid_search_parameters(name, movie_id, genre):
            movies = service.search_movies(name, movie_id, genre)
    """

    def __init__(self, store: CatalogStore):
        self.store = store
        self.engine = QueryEngine(store.get_all())
        logger.info(f"MovieService initialized with {len(store)} movies")

    @classmethod
    def from_reader(cls, reader: ResourceReader) -> "MovieService":
        return cls(new_catalog_store(reader))

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "MovieService":
        return cls.from_reader(file_reader(path))

    @property
    def load_result(self) -> LoadResult:
        return self.store.load_result

    def get_all_movies(self) -> Tuple[Movie, ...]:
        """Return the whole catalog in load order."""
        return self.store.get_all()

    def get_movie_by_id(self, movie_id: Optional[int]) -> Optional[Movie]:
        """Return the movie with this id, or None."""
        return self.store.get_by_id(movie_id)

    def search_movies(
        self,
        name: Optional[str] = None,
        movie_id: Optional[int] = None,
        genre: Optional[str] = None,
    ) -> List[Movie]:
        """
        Search by any combination of name, id and genre.

        Args:
            name: Case-insensitive partial title match
            movie_id: Exact movie id
            genre: Case-insensitive partial genre match

        Returns:
            Movies matching every supplied criterion; the whole catalog
            when no criterion is active
        """
        logger.info(
            "Searching movies with name: %r, id: %s, genre: %r", name, movie_id, genre
        )
        results = self.engine.search(name, movie_id, genre)
        logger.info(f"Search completed: {len(results)} movies match")
        return results

    def search_movies_by_name(self, name: Optional[str]) -> List[Movie]:
        """Search by partial title only; blank input returns an empty list."""
        if not has_valid_criteria(name=name):
            logger.warning("Empty movie name provided for search, returning no movies")
            return []
        results = self.engine.search_by_name(name)
        logger.info(f"Found {len(results)} movies with name containing {name.strip()!r}")
        return results

    def search_movies_by_genre(self, genre: Optional[str]) -> List[Movie]:
        """Search by partial genre only; blank input returns an empty list."""
        if not has_valid_criteria(genre=genre):
            logger.warning("Empty genre provided for search, returning no movies")
            return []
        results = self.engine.search_by_genre(genre)
        logger.info(f"Found {len(results)} movies in genre containing {genre.strip()!r}")
        return results

    def has_valid_search_parameters(
        self,
        name: Optional[str] = None,
        movie_id: Optional[int] = None,
        genre: Optional[str] = None,
    ) -> bool:
        """True if at least one of name, movie_id, genre is a usable criterion."""
        return has_valid_criteria(name, movie_id, genre)
