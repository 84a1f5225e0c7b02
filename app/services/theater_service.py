# app/services/theater_service.py

import logging
from typing import List, Dict, Any

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.config import settings
from app.data_access.mongo_client import TheaterRepository
from app.models.theater import PLACEHOLDER_THEATER, PLACEHOLDER_THEATER_UPDATE
from app.utils.helpers import require_object_id

logger = logging.getLogger(__name__)

class TheaterNotFoundError(Exception):
    """Custom exception when a theater is not found."""
    pass

class TheaterService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.repository = TheaterRepository(db)

    async def list_theaters(self) -> List[Dict[str, Any]]:
        """Retrieves up to LIST_LIMIT theaters, in store order."""
        theaters = await self.repository.find_many({}, settings.LIST_LIMIT)
        logger.info(f"Fetched {len(theaters)} theaters")
        return theaters

    async def get_theater(self, theater_id: str) -> Dict[str, Any]:
        require_object_id(theater_id)
        theater = await self.repository.find_one({"_id": ObjectId(theater_id)})
        if theater is None:
            logger.warning(f"Theater with ID {theater_id} not found in database.")
            raise TheaterNotFoundError(f"Theater with ID '{theater_id}' not found.")
        return theater

    async def create_theater(self) -> str:
        inserted_id = await self.repository.insert_one(PLACEHOLDER_THEATER.model_dump())
        logger.info(f"Inserted placeholder theater {inserted_id}")
        return inserted_id

    async def update_theater(self, theater_id: str) -> None:
        require_object_id(theater_id)
        matched = await self.repository.update_one(
            {"_id": ObjectId(theater_id)}, PLACEHOLDER_THEATER_UPDATE.model_dump()
        )
        if matched == 0:
            logger.warning(f"No theater to update with ID {theater_id}")
            raise TheaterNotFoundError(f"Theater with ID '{theater_id}' not found.")

    async def delete_theater(self, theater_id: str) -> None:
        require_object_id(theater_id)
        deleted = await self.repository.delete_one({"_id": ObjectId(theater_id)})
        if deleted == 0:
            logger.warning(f"No theater deleted with ID {theater_id}")
            raise TheaterNotFoundError(f"Theater with ID '{theater_id}' not found.")
        logger.info(f"Deleted theater {theater_id}")
