"""
Movie API endpoints.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from movie_catalog.api.dependencies import get_movie_service
from movie_catalog.api.models.movie import MovieResponse, MovieList, SearchResponse
from movie_catalog.core.catalog.service import MovieService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/movies", tags=["movies"])

MISSING_CRITERIA_MESSAGE = (
    "Provide at least one search parameter: name, id, or genre."
)
SEARCH_FAILED_MESSAGE = "Something went wrong with the search. Try again later."


def _to_movie_list(movies) -> MovieList:
    return MovieList(
        movies=[MovieResponse.model_validate(m) for m in movies],
        total=len(movies),
    )


def search_result_message(count: int) -> str:
    """Human-readable summary of a search result count."""
    if count == 0:
        return "No movies found matching your search criteria."
    return f"Found {count} movie{'' if count == 1 else 's'} matching your search."


@router.get("", response_model=MovieList)
def list_movies(service: MovieService = Depends(get_movie_service)):
    """List every movie in the catalog."""
    logger.info("Fetching movies")
    return _to_movie_list(service.get_all_movies())


@router.get("/search", response_model=SearchResponse)
def search_movies(
    name: str | None = Query(None),
    id: int | None = Query(None),
    genre: str | None = Query(None),
    service: MovieService = Depends(get_movie_service),
):
    """Search movies by partial name, exact id, and partial genre (all combined)."""
    search_parameters = {"name": name, "id": id, "genre": genre}

    if not service.has_valid_search_parameters(name, id, genre):
        logger.warning("No valid search parameters provided")
        body = SearchResponse(
            success=False,
            message=MISSING_CRITERIA_MESSAGE,
            search_parameters=search_parameters,
        )
        return JSONResponse(status_code=400, content=body.model_dump())

    try:
        results = service.search_movies(name, id, genre)
    except Exception as e:
        logger.exception("Error during movie search")
        body = SearchResponse(
            success=False,
            message=SEARCH_FAILED_MESSAGE,
            search_parameters=search_parameters,
            error=str(e),
        )
        return JSONResponse(status_code=500, content=body.model_dump())

    return SearchResponse(
        success=True,
        message=search_result_message(len(results)),
        total_results=len(results),
        results=[MovieResponse.model_validate(m) for m in results],
        search_parameters=search_parameters,
    )


@router.get("/search/by-name", response_model=MovieList)
def search_movies_by_name(
    name: str | None = Query(None),
    service: MovieService = Depends(get_movie_service),
):
    """Search movies by partial name only."""
    return _to_movie_list(service.search_movies_by_name(name))


@router.get("/search/by-genre", response_model=MovieList)
def search_movies_by_genre(
    genre: str | None = Query(None),
    service: MovieService = Depends(get_movie_service),
):
    """Search movies by partial genre only."""
    return _to_movie_list(service.search_movies_by_genre(genre))


@router.get("/{movie_id}", response_model=MovieResponse)
def get_movie(movie_id: int, service: MovieService = Depends(get_movie_service)):
    """Get movie details by ID."""
    movie = service.get_movie_by_id(movie_id)
    if not movie:
        logger.warning(f"Movie with ID {movie_id} not found")
        raise HTTPException(status_code=404, detail="Movie not found")
    return MovieResponse.model_validate(movie)
