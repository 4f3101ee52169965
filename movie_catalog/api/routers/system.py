"""
System API endpoints (health).
"""

from fastapi import APIRouter, Depends

from movie_catalog.api.dependencies import get_movie_service
from movie_catalog.core.catalog.service import MovieService

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health_check(service: MovieService = Depends(get_movie_service)):
    """Health check: catalog loaded and movie count."""
    load_result = service.load_result
    return {
        "status": "healthy" if load_result.ok else "degraded",
        "catalog_loaded": load_result.ok,
        "movies": len(service.get_all_movies()),
        "load_error": load_result.error,
    }
