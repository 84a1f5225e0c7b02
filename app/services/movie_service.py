# app/services/movie_service.py

import logging
from typing import List, Dict, Any

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.config import settings
from app.data_access.mongo_client import MovieRepository
from app.models.movie import PLACEHOLDER_MOVIE, PLACEHOLDER_MOVIE_UPDATE
from app.utils.helpers import require_object_id

logger = logging.getLogger(__name__)

class MovieNotFoundError(Exception):
    """Custom exception when a movie is not found."""
    pass

class MovieService:
    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initializes the Movie Service.

        Args:
            db: An instance of AsyncIOMotorDatabase (Motor client).
        """
        self.repository = MovieRepository(db)

    async def list_movies(self) -> List[Dict[str, Any]]:
        """
        Retrieves up to LIST_LIMIT movies with no filter, in store order.

        Raises:
            PyMongoError: If a database error occurs.
        """
        movies = await self.repository.find_many({}, settings.LIST_LIMIT)
        logger.info(f"Fetched {len(movies)} movies")
        return movies

    async def get_movie(self, movie_id: str) -> Dict[str, Any]:
        """
        Retrieves a single movie document by its ObjectId string.

        Raises:
            InvalidObjectIdError: If the id is malformed (no store call is made).
            MovieNotFoundError: If no movie has that id.
            PyMongoError: If a database error occurs.
        """
        require_object_id(movie_id)
        movie = await self.repository.find_one({"_id": ObjectId(movie_id)})
        if movie is None:
            logger.warning(f"Movie with ID {movie_id} not found in database.")
            raise MovieNotFoundError(f"Movie with ID '{movie_id}' not found.")
        return movie

    async def create_movie(self) -> str:
        """Inserts the placeholder movie and returns its new id."""
        inserted_id = await self.repository.insert_one(PLACEHOLDER_MOVIE.model_dump())
        logger.info(f"Inserted placeholder movie {inserted_id}")
        return inserted_id

    async def update_movie(self, movie_id: str) -> None:
        """
        Overwrites the movie fields with the fixed update payload.

        Raises:
            InvalidObjectIdError, MovieNotFoundError, PyMongoError
        """
        require_object_id(movie_id)
        matched = await self.repository.update_one(
            {"_id": ObjectId(movie_id)}, PLACEHOLDER_MOVIE_UPDATE.model_dump()
        )
        if matched == 0:
            logger.warning(f"No movie to update with ID {movie_id}")
            raise MovieNotFoundError(f"Movie with ID '{movie_id}' not found.")

    async def delete_movie(self, movie_id: str) -> None:
        """
        Removes a movie. Comments referencing it are left in place.

        Raises:
            InvalidObjectIdError, MovieNotFoundError, PyMongoError
        """
        require_object_id(movie_id)
        deleted = await self.repository.delete_one({"_id": ObjectId(movie_id)})
        if deleted == 0:
            logger.warning(f"No movie deleted with ID {movie_id}")
            raise MovieNotFoundError(f"Movie with ID '{movie_id}' not found.")
        logger.info(f"Deleted movie {movie_id}")
