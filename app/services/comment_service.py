# app/services/comment_service.py

import logging
from typing import List, Dict, Any

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.config import settings
from app.data_access.mongo_client import CommentRepository
from app.models.comment import NEW_COMMENT_SENTINEL, build_placeholder_comment
from app.utils.helpers import require_object_id

logger = logging.getLogger(__name__)

class CommentNotFoundError(Exception):
    """Custom exception when no comment matches both the comment and movie ids."""
    pass

class SentinelMismatchError(Exception):
    """Raised when a comment create does not target the sentinel comment id."""
    pass

class CommentService:
    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initializes the Comment Service.

        Comments are always addressed through their movie: every single-comment
        lookup matches on both the comment id and the movie reference.
        """
        self.repository = CommentRepository(db)

    async def list_comments(self, movie_id: str) -> List[Dict[str, Any]]:
        """
        Retrieves up to LIST_LIMIT comments referencing a movie.

        Raises:
            InvalidObjectIdError: If the movie id is malformed.
            PyMongoError: If a database error occurs.
        """
        require_object_id(movie_id)
        comments = await self.repository.find_by_movie(movie_id, settings.LIST_LIMIT)
        logger.info(f"Fetched {len(comments)} comments for movie {movie_id}")
        return comments

    async def get_comment(self, movie_id: str, comment_id: str) -> Dict[str, Any]:
        require_object_id(movie_id, comment_id)
        comment = await self.repository.find_one(
            CommentRepository.composite_filter(movie_id, comment_id)
        )
        if comment is None:
            logger.warning(f"Comment {comment_id} for movie {movie_id} not found.")
            raise CommentNotFoundError(f"Comment '{comment_id}' not found for movie '{movie_id}'.")
        return comment

    async def create_comment(self, movie_id: str, comment_id: str) -> str:
        """
        Inserts the placeholder comment on a movie.

        Args:
            movie_id: Movie the comment references.
            comment_id: Must be the literal sentinel "null".

        Raises:
            SentinelMismatchError: If comment_id is anything but the sentinel (checked first).
            InvalidObjectIdError: If the movie id is malformed.
            PyMongoError: If a database error occurs.
        """
        if comment_id != NEW_COMMENT_SENTINEL:
            logger.warning(f"Comment create targeted '{comment_id}' instead of '{NEW_COMMENT_SENTINEL}'")
            raise SentinelMismatchError(comment_id)
        require_object_id(movie_id)
        inserted_id = await self.repository.insert_one(build_placeholder_comment(movie_id))
        logger.info(f"Inserted comment {inserted_id} for movie {movie_id}")
        return inserted_id

    async def update_comment(self, movie_id: str, comment_id: str, text: str) -> None:
        require_object_id(movie_id, comment_id)
        matched = await self.repository.update_one(
            CommentRepository.composite_filter(movie_id, comment_id), {"text": text}
        )
        if matched == 0:
            logger.warning(f"No comment {comment_id} to update for movie {movie_id}")
            raise CommentNotFoundError(f"Comment '{comment_id}' not found for movie '{movie_id}'.")

    async def delete_comment(self, movie_id: str, comment_id: str) -> None:
        require_object_id(movie_id, comment_id)
        deleted = await self.repository.delete_one(
            CommentRepository.composite_filter(movie_id, comment_id)
        )
        if deleted == 0:
            logger.warning(f"No comment {comment_id} deleted for movie {movie_id}")
            raise CommentNotFoundError(f"Comment '{comment_id}' not found for movie '{movie_id}'.")
        logger.info(f"Deleted comment {comment_id} of movie {movie_id}")
