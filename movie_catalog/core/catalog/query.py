"""
Query engine for the movie catalog.

Filters are plain predicates applied left to right over the catalog
snapshot. Name and genre match case-insensitively on substrings; id
matches exactly. Every active filter narrows the result (AND semantics),
and results keep catalog order.
"""

import logging
from typing import Callable, List, Optional, Sequence, Tuple

from movie_catalog.core.catalog.models import Movie

logger = logging.getLogger(__name__)

Predicate = Callable[[Movie], bool]


def normalize_term(term: Optional[str]) -> Optional[str]:
    """Trim and lower-case a search term; None if nothing is left."""
    if term is None:
        return None
    term = term.strip().lower()
    return term or None


def is_positive_id(movie_id: Optional[int]) -> bool:
    """True only for a positive int; anything else is an inactive id."""
    if isinstance(movie_id, bool) or not isinstance(movie_id, int):
        return False
    return movie_id > 0


def title_contains(term: str) -> Predicate:
    return lambda movie: term in movie.title.lower()


def id_equals(movie_id: int) -> Predicate:
    return lambda movie: movie.id == movie_id


def genre_contains(term: str) -> Predicate:
    return lambda movie: term in movie.genre.lower()


def has_valid_criteria(
    name: Optional[str] = None,
    movie_id: Optional[int] = None,
    genre: Optional[str] = None,
) -> bool:
    """
    Check whether at least one search criterion is usable.

    Args:
        name: Title search term
        movie_id: Exact movie id
        genre: Genre search term

    Returns:
        True if name or genre is non-blank, or movie_id is positive
    """
    return (
        normalize_term(name) is not None
        or is_positive_id(movie_id)
        or normalize_term(genre) is not None
    )


class QueryEngine:
    """
    Stateless filtering over an immutable movie sequence.

    Usage:
        engine = QueryEngine(store.get_all())
        engine.search(name="prison", genre="drama")
    """

    def __init__(self, movies: Sequence[Movie]):
        self._movies: Tuple[Movie, ...] = tuple(movies)

    def active_filters(
        self,
        name: Optional[str] = None,
        movie_id: Optional[int] = None,
        genre: Optional[str] = None,
    ) -> List[Tuple[str, Predicate]]:
        """Build the (label, predicate) pairs for the active criteria, in filter order."""
        filters = []

        name_term = normalize_term(name)
        if name_term is not None:
            filters.append((f"name '{name_term}'", title_contains(name_term)))

        if is_positive_id(movie_id):
            filters.append((f"id {movie_id}", id_equals(movie_id)))

        genre_term = normalize_term(genre)
        if genre_term is not None:
            filters.append((f"genre '{genre_term}'", genre_contains(genre_term)))

        return filters

    def search(
        self,
        name: Optional[str] = None,
        movie_id: Optional[int] = None,
        genre: Optional[str] = None,
    ) -> List[Movie]:
        """
        Filter the catalog by any combination of name, id and genre.

        Inactive criteria (None, blank, or non-positive id) are skipped. With
        no active criteria the whole catalog is returned; callers decide
        whether that is acceptable via has_valid_criteria().

        Returns:
            Matching movies in catalog order
        """
        results = list(self._movies)

        for label, predicate in self.active_filters(name, movie_id, genre):
            results = [movie for movie in results if predicate(movie)]
            logger.debug(f"After {label} filter: {len(results)} movies remain")

        return results

    def search_by_name(self, name: Optional[str]) -> List[Movie]:
        """Movies whose title contains name; empty list for blank input."""
        term = normalize_term(name)
        if term is None:
            return []
        matches = title_contains(term)
        return [movie for movie in self._movies if matches(movie)]

    def search_by_genre(self, genre: Optional[str]) -> List[Movie]:
        """Movies whose genre contains genre; empty list for blank input."""
        term = normalize_term(genre)
        if term is None:
            return []
        matches = genre_contains(term)
        return [movie for movie in self._movies if matches(movie)]
