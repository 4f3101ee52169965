"""
Tests for MovieService against the bundled dataset.

These mirror how the API uses the service: load data/movies.json once,
then run queries against it.
"""

import pytest

from movie_catalog.api.config import get_movies_data_path
from movie_catalog.core.catalog import MovieService


@pytest.fixture(scope="module")
def service():
    """Movie service over the bundled dataset."""
    return MovieService.from_path(get_movies_data_path())


def titles(movies):
    return [m.title for m in movies]


class TestBundledCatalog:
    """Tests for the bundled dataset and basic accessors."""

    def test_dataset_loads(self, service):
        assert service.load_result.ok
        assert len(service.get_all_movies()) >= 12

    def test_ids_unique_and_positive(self, service):
        ids = [m.id for m in service.get_all_movies()]
        assert len(ids) == len(set(ids))
        assert all(i > 0 for i in ids)

    def test_get_movie_by_id(self, service):
        movie = service.get_movie_by_id(1)
        assert movie is not None
        assert movie.title == "The Prison Escape"

    def test_get_movie_by_id_missing(self, service):
        assert service.get_movie_by_id(999) is None
        assert service.get_movie_by_id(None) is None
        assert service.get_movie_by_id(0) is None


class TestSearchMovies:
    """Tests for search_movies over the bundled dataset."""

    def test_search_by_id_only(self, service):
        results = service.search_movies(None, 1, None)
        assert len(results) == 1
        assert results[0].id == 1
        assert results[0].title == "The Prison Escape"

    def test_search_by_unknown_id(self, service):
        assert service.search_movies(None, 999, None) == []

    def test_no_parameters_returns_all(self, service):
        assert service.search_movies(None, None, None) == list(service.get_all_movies())

    def test_whitespace_is_trimmed(self, service):
        assert service.search_movies("  Prison  ", None, None) == service.search_movies("Prison", None, None)

    def test_multiple_parameters(self, service):
        results = service.search_movies("The", None, "Drama")
        assert results
        for movie in results:
            assert "the" in movie.title.lower()
            assert "drama" in movie.genre.lower()


class TestSingleFieldSearches:
    """Tests for search_movies_by_name and search_movies_by_genre."""

    def test_by_name_partial(self, service):
        results = service.search_movies_by_name("prison")
        assert titles(results) == ["The Prison Escape"]
        assert results[0].id == 1

    @pytest.mark.parametrize("term", ["FAMILY", "family", "Family"])
    def test_by_name_case_insensitive(self, service, term):
        assert titles(service.search_movies_by_name(term)) == ["The Family Boss"]

    def test_by_name_not_found(self, service):
        assert service.search_movies_by_name("NonExistentMovie") == []

    def test_by_genre_complex_genre(self, service):
        drama_ids = {m.id for m in service.search_movies_by_genre("drama")}
        crime_ids = {m.id for m in service.search_movies_by_genre("crime")}

        assert {1, 2} <= drama_ids
        assert 2 in crime_ids
        assert 1 not in crime_ids
        assert drama_ids & crime_ids

    def test_by_genre_case_insensitive(self, service):
        upper = service.search_movies_by_genre("ACTION")
        assert upper
        assert upper == service.search_movies_by_genre("action")
        assert upper == service.search_movies_by_genre("Action")

    def test_by_genre_not_found(self, service):
        assert service.search_movies_by_genre("NonExistentGenre") == []

    @pytest.mark.parametrize("term", [None, "", "   "])
    def test_blank_input_returns_empty(self, service, term):
        assert service.search_movies_by_name(term) == []
        assert service.search_movies_by_genre(term) == []


class TestHasValidSearchParameters:
    """Tests for has_valid_search_parameters."""

    def test_valid(self, service):
        assert service.has_valid_search_parameters("test", None, None)
        assert service.has_valid_search_parameters(None, 1, None)
        assert service.has_valid_search_parameters(None, None, "Drama")

    def test_invalid(self, service):
        assert not service.has_valid_search_parameters(None, None, None)
        assert not service.has_valid_search_parameters("   ", -1, "")


def test_service_from_bad_reader_is_empty():
    """A service over an unreadable dataset starts empty instead of failing."""
    service = MovieService.from_reader(lambda: "not json")

    assert not service.load_result.ok
    assert service.get_all_movies() == ()
    assert service.search_movies() == []
    assert service.search_movies_by_name("prison") == []
