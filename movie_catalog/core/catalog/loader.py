"""
Dataset loading for the movie catalog.

The load step never raises: a missing or malformed source is logged and
reported through ``LoadResult.error`` with an empty movie tuple, so the
service can still start and show an empty catalog.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Tuple, Union

from pydantic import TypeAdapter

from movie_catalog.core.catalog.models import Movie

logger = logging.getLogger(__name__)

ResourceReader = Callable[[], str]

_MOVIE_LIST = TypeAdapter(list[Movie])


@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading the dataset: the movies, or the reason there are none."""

    movies: Tuple[Movie, ...] = ()
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def file_reader(path: Union[str, Path]) -> ResourceReader:
    """
    Build a resource reader for a dataset file on disk.

    Args:
        path: Path to a JSON dataset file

    Returns:
        Zero-argument callable returning the file contents
    """
    path = Path(path)

    def read() -> str:
        return path.read_text(encoding="utf-8")

    return read


def parse_movies(text: str) -> Tuple[Movie, ...]:
    """
    Parse a JSON array of movie objects, keeping source order.

    Raises:
        ValueError: If the text is not a valid dataset (pydantic's
            ValidationError is a ValueError) or contains duplicate ids
    """
    movies = tuple(_MOVIE_LIST.validate_json(text))

    seen = set()
    for movie in movies:
        if movie.id in seen:
            raise ValueError(f"Duplicate movie id in dataset: {movie.id}")
        seen.add(movie.id)

    return movies


def load_all(reader: ResourceReader) -> LoadResult:
    """
    Read and parse the whole dataset.

    Args:
        reader: Callable returning the raw dataset text

    Returns:
        LoadResult with every movie in source order, or an empty result
        carrying the error message if anything failed
    """
    try:
        movies = parse_movies(reader())
    except Exception as e:
        logger.error("Failed to load movies from dataset: %s", e)
        return LoadResult(error=str(e))

    logger.info(f"Loaded {len(movies)} movies from dataset")
    return LoadResult(movies=movies)
