# MongoDB repository logic
# app/data_access/mongo_client.py

import logging
from typing import List, Optional, Dict, Any

from motor.motor_asyncio import AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo.errors import PyMongoError
from bson import ObjectId

logger = logging.getLogger(__name__)

# --- Base Repository ---
class BaseRepository:
    """Single-document CRUD shared by every collection."""
    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str):
        self.db = db
        self.collection_name = collection_name
        self.collection: AsyncIOMotorCollection = db[collection_name]
        logger.debug(f"Initialized repository for collection: {collection_name}")

    def _check_db(self):
        """Helper to check if DB instance is available."""
        if self.db is None or self.collection is None:
            logger.critical(f"Database not available for collection {self.collection_name}")
            raise ConnectionError(f"Database connection not available for {self.collection_name}")

    async def find_many(self, query: Dict[str, Any], limit: int) -> List[Dict[str, Any]]:
        """Returns at most `limit` documents matching the query, in store order."""
        self._check_db()
        try:
            cursor = self.collection.find(query).limit(limit)
            return await cursor.to_list(length=limit)
        except PyMongoError as e:
            logger.error(f"DB error listing {self.collection_name} with {query}: {e}", exc_info=True)
            raise

    async def find_one(self, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        self._check_db()
        try:
            return await self.collection.find_one(query)
        except PyMongoError as e:
            logger.error(f"DB error finding {self.collection_name} document {query}: {e}", exc_info=True)
            raise

    async def insert_one(self, doc: Dict[str, Any]) -> str:
        """Inserts a document and returns the store-assigned id as a string."""
        self._check_db()
        try:
            result = await self.collection.insert_one(doc)
            return str(result.inserted_id)
        except PyMongoError as e:
            logger.error(f"DB error inserting into {self.collection_name}: {e}", exc_info=True)
            raise

    async def update_one(self, query: Dict[str, Any], fields: Dict[str, Any]) -> int:
        """Applies `$set` with the given fields and returns the matched count."""
        self._check_db()
        try:
            result = await self.collection.update_one(query, {"$set": fields})
            return result.matched_count
        except PyMongoError as e:
            logger.error(f"DB error updating {self.collection_name} document {query}: {e}", exc_info=True)
            raise

    async def delete_one(self, query: Dict[str, Any]) -> int:
        """Removes at most one matching document and returns the deleted count."""
        self._check_db()
        try:
            result = await self.collection.delete_one(query)
            return result.deleted_count
        except PyMongoError as e:
            logger.error(f"DB error deleting {self.collection_name} document {query}: {e}", exc_info=True)
            raise

# --- Movie Repository ---
class MovieRepository(BaseRepository):
    def __init__(self, db: AsyncIOMotorDatabase):
        super().__init__(db, collection_name="movies")

# --- Theater Repository ---
class TheaterRepository(BaseRepository):
    def __init__(self, db: AsyncIOMotorDatabase):
        super().__init__(db, collection_name="theaters")

# --- Comment Repository ---
class CommentRepository(BaseRepository):
    def __init__(self, db: AsyncIOMotorDatabase):
        super().__init__(db, collection_name="comments")

    @staticmethod
    def composite_filter(movie_id: str, comment_id: str) -> Dict[str, Any]:
        """Matches a comment only when it also references the given movie."""
        return {"_id": ObjectId(comment_id), "movie_id": ObjectId(movie_id)}

    async def find_by_movie(self, movie_id: str, limit: int) -> List[Dict[str, Any]]:
        return await self.find_many({"movie_id": ObjectId(movie_id)}, limit)
