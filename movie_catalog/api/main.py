"""
FastAPI application entry point for the Movie Catalog API.

Run: uvicorn movie_catalog.api.main:app --host 0.0.0.0 --port 8000
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from movie_catalog.api.config import get_api_host, get_api_port, get_log_file, get_log_level
from movie_catalog.api.dependencies import get_movie_service
from movie_catalog.api.routers import movies, system
from movie_catalog.utils.logging_config import configure_api_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_api_logging(level=get_log_level(), log_file=get_log_file())
    # Load the catalog before the first request is served
    get_movie_service()
    yield


app = FastAPI(
    title="Movie Catalog API",
    description="Browse and search a fixed catalog of movies",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(movies.router)
app.include_router(system.router)


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Movie Catalog API",
        "docs": "/docs",
        "health": "/api/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=get_api_host(), port=get_api_port())
