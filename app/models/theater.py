# app/models/theater.py

from typing import Optional
from pydantic import BaseModel, Field

class TheaterBase(BaseModel):
    """Theater fields written by this API. Location data in the store is left untouched."""
    theaterId: Optional[str] = Field(None, description="Theater identifier field.")

PLACEHOLDER_THEATER = TheaterBase(theaterId="test")
PLACEHOLDER_THEATER_UPDATE = TheaterBase(theaterId="test2")
