"""
Movie record model for the in-memory catalog.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Movie(BaseModel):
    """
    One immutable catalog entry.

    The bundled dataset uses camelCase keys (``movieName``, ``duration``,
    ``imdbRating``); the snake_case field names are accepted as well.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0)
    title: str = Field(..., min_length=1, validation_alias=AliasChoices("movieName", "title"))
    director: str
    year: int
    genre: str
    description: str
    duration_minutes: int = Field(..., validation_alias=AliasChoices("duration", "duration_minutes"))
    rating: float = Field(..., validation_alias=AliasChoices("imdbRating", "rating"))
