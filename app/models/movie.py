# app/models/movie.py

from typing import List, Optional
from pydantic import BaseModel, Field

# --- Base Model ---
class MovieBase(BaseModel):
    """Attributes of a movie document written by this API."""
    title: Optional[str] = Field(None, description="Movie title.")
    year: Optional[int] = Field(None, description="Year of release.")
    director: Optional[str] = Field(None, description="Director name.")
    genre: List[str] = Field(default_factory=list, description="Ordered list of genres.")
    plot: Optional[str] = Field(None, description="Short synopsis.")

# --- Placeholder documents ---
# Client bodies are not read on create/update; these fixed documents are written instead.
PLACEHOLDER_MOVIE = MovieBase(
    title="test",
    year=2025,
    director="Thomas",
    genre=["Sci-fi"],
    plot="test test testt",
)

PLACEHOLDER_MOVIE_UPDATE = MovieBase(
    title="Thomas2",
    year=2014,
    director="CThomas",
    genre=["Sci-fi", "Adventure"],
    plot="A group of explorers travel through a wormhole in space in an attempt to ensure humanity's survival.",
)
