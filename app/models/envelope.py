# app/models/envelope.py

from typing import Any, Optional
from pydantic import BaseModel, Field

class Envelope(BaseModel):
    """Uniform response body shared by every resource endpoint."""
    status: int = Field(..., description="Outcome status code (mirrors HTTP semantics).")
    message: Optional[str] = Field(None, description="Human readable summary.")
    data: Optional[Any] = Field(None, description="Payload: a document, a list of documents or an id.")
    error: Optional[str] = Field(None, description="Error detail, present on failures.")
