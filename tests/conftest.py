"""
Shared pytest fixtures.

The Motor database is replaced by MagicMock collections through FastAPI's
dependency overrides, so no MongoDB server is needed. ASGITransport does not
run the application lifespan, so startup never tries to connect either.
"""

import os
from unittest.mock import AsyncMock, MagicMock

# Required settings must exist before any app import
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import AsyncClient, ASGITransport

from app.api.deps import get_db
from app.server import app


def make_collection():
    """
    Builds a mock Motor collection.

    Defaults describe an empty collection: find returns no documents,
    find_one returns None and update/delete match nothing.
    """
    collection = MagicMock()
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=[])
    collection.find.return_value.limit.return_value = cursor
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id=ObjectId()))
    collection.update_one = AsyncMock(return_value=MagicMock(matched_count=0))
    collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=0))
    return collection


@pytest.fixture
def collections():
    """One mock collection per store collection, keyed by name."""
    return {
        "movies": make_collection(),
        "theaters": make_collection(),
        "comments": make_collection(),
    }


@pytest.fixture
def mock_db(collections):
    db = MagicMock()
    db.__getitem__.side_effect = lambda name: collections[name]
    return db


@pytest_asyncio.fixture
async def test_client(mock_db):
    """HTTPX AsyncClient talking to the app with the database overridden."""
    async def override_get_db():
        yield mock_db

    app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def valid_id():
    return str(ObjectId())


@pytest.fixture
def store_untouched(collections):
    """Returns a callable asserting that no collection method was called."""
    def check():
        for collection in collections.values():
            collection.find.assert_not_called()
            collection.find_one.assert_not_awaited()
            collection.insert_one.assert_not_awaited()
            collection.update_one.assert_not_awaited()
            collection.delete_one.assert_not_awaited()
    return check
