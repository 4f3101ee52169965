"""
In-memory catalog store.

Built once at startup and never mutated afterwards, so concurrent reads
need no locking.
"""

import logging
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from movie_catalog.core.catalog.loader import LoadResult, ResourceReader, load_all
from movie_catalog.core.catalog.models import Movie
from movie_catalog.core.catalog.query import is_positive_id

logger = logging.getLogger(__name__)


class CatalogStore:
    """
    Owns the loaded movies and an id index over them.

    Usage:
        store = CatalogStore(file_reader("data/movies.json"))
        store.get_by_id(1)
    """

    def __init__(self, reader: ResourceReader):
        """
        Load the catalog.

        Args:
            reader: Callable returning the raw dataset text
        """
        self.load_result: LoadResult = load_all(reader)
        self._movies: Tuple[Movie, ...] = self.load_result.movies
        self._index: Mapping[int, Movie] = MappingProxyType(
            {movie.id: movie for movie in self._movies}
        )

        if not self.load_result.ok:
            logger.warning("Catalog store started with an empty catalog")

    def __len__(self) -> int:
        return len(self._movies)

    def get_all(self) -> Tuple[Movie, ...]:
        """Return every movie in load order."""
        return self._movies

    def get_by_id(self, movie_id: Optional[int]) -> Optional[Movie]:
        """
        Look up a movie by id.

        Returns:
            Movie or None if the id is missing, non-positive, or unknown
        """
        if not is_positive_id(movie_id):
            return None
        return self._index.get(movie_id)


def new_catalog_store(reader: ResourceReader) -> CatalogStore:
    """Create a catalog store from a resource reader."""
    return CatalogStore(reader)
