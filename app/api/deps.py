# FastAPI dependencies (database handle)
# app/api/deps.py

import asyncio
import logging
from typing import AsyncGenerator, Optional

from fastapi import HTTPException, status
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import ConnectionFailure

from app.core.config import settings

logger = logging.getLogger(__name__)

# --- Global Client (initialized once, reused by every request) ---
# Motor manages connection pooling internally.

mongo_client: Optional[AsyncIOMotorClient] = None
db_instance: Optional[AsyncIOMotorDatabase] = None
_init_lock = asyncio.Lock()

async def initialize_connections():
    """
    Initializes the MongoDB connection.
    Called during FastAPI startup and lazily by get_db if startup failed.
    """
    global mongo_client, db_instance
    logger.info("Initializing external connections...")

    try:
        logger.info(f"Attempting to connect to MongoDB: {settings.MONGODB_URI.get_secret_value()[:15]}...") # Log partial URI safely
        client = AsyncIOMotorClient(
            settings.MONGODB_URI.get_secret_value(),
            serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
        )
        # Ping the server to verify connection early
        await client.admin.command('ping')
        mongo_client = client
        db_instance = client[settings.MONGODB_DB_NAME]
        logger.info(f"MongoDB client initialized successfully. Using database: '{settings.MONGODB_DB_NAME}'")

    except ConnectionFailure as e:
        logger.error(f"MongoDB connection failed during initialization: {e}", exc_info=True)
        mongo_client = None
        db_instance = None
    except Exception as e:
        logger.error(f"Unexpected error initializing MongoDB client: {e}", exc_info=True)
        mongo_client = None
        db_instance = None

async def close_connections():
    """
    Closes the MongoDB connection.
    Called during FastAPI shutdown.
    """
    global mongo_client, db_instance
    logger.info("Closing external connections...")
    if mongo_client:
        mongo_client.close()
        logger.info("MongoDB client closed.")
    mongo_client = None
    db_instance = None


# --- Database Dependency ---

async def get_db() -> AsyncGenerator[AsyncIOMotorDatabase, None]:
    """
    FastAPI dependency that yields the application's MongoDB database instance.
    Connects on first use if the startup connection was not established.

    Raises:
        HTTPException 503: If the database instance is not available.
    """
    if db_instance is None:
        async with _init_lock:
            # Another request may have connected while we waited
            if db_instance is None:
                await initialize_connections()
    if db_instance is None:
        logger.critical("MongoDB database instance is not available. Check initialization.")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database service not available.",
        )
    yield db_instance
