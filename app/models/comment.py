# app/models/comment.py

from datetime import datetime, timezone
from typing import Any, Dict

from bson import ObjectId
from pydantic import BaseModel, Field

# Path segment that must be used as the comment id when creating a comment
NEW_COMMENT_SENTINEL = "null"

class CommentBase(BaseModel):
    """Comment attributes other than the movie reference and timestamp."""
    name: str = Field(..., description="Author name.")
    email: str = Field(..., description="Author email.")
    text: str = Field(..., description="Comment body.")

class CommentUpdate(BaseModel):
    """Request body for PUT /movies/{movie_id}/comments/{comment_id}."""
    text: str = Field(..., description="New comment text.")

PLACEHOLDER_COMMENT = CommentBase(name="test", email="test", text="test")

def build_placeholder_comment(movie_id: str) -> Dict[str, Any]:
    """Returns the document inserted for a new comment on the given movie."""
    doc = PLACEHOLDER_COMMENT.model_dump()
    doc["movie_id"] = ObjectId(movie_id)
    doc["date"] = datetime.now(timezone.utc)
    return doc
