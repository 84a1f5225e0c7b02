"""
Endpoint tests for comments nested under /api/movies/{movie_id}/comments.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo.errors import PyMongoError

pytestmark = pytest.mark.asyncio


@pytest.fixture
def movie_id():
    return "573a1390f29313caabcd680a"


@pytest.fixture
def comment_id():
    return "5a9427648b0beebeb6957a88"


class TestListComments:

    async def test_filters_by_movie(self, test_client, collections, movie_id, comment_id):
        cursor = collections["comments"].find.return_value.limit.return_value
        cursor.to_list.return_value = [{
            "_id": ObjectId(comment_id),
            "movie_id": ObjectId(movie_id),
            "name": "Thomas Morris",
            "date": datetime(2004, 2, 26, 6, 33, 3, tzinfo=timezone.utc),
        }]

        response = await test_client.get(f"/api/movies/{movie_id}/comments")

        body = response.json()
        assert body["status"] == 200
        assert body["data"][0]["_id"] == comment_id
        assert body["data"][0]["movie_id"] == movie_id
        assert body["data"][0]["date"].startswith("2004-02-26T06:33:03")
        collections["comments"].find.assert_called_once_with({"movie_id": ObjectId(movie_id)})
        collections["comments"].find.return_value.limit.assert_called_once_with(10)

    async def test_malformed_movie_id(self, test_client, store_untouched):
        response = await test_client.get("/api/movies/bad/comments")

        assert response.json() == {
            "status": 400,
            "message": "Invalid movie ID",
            "error": "ID format is incorrect",
        }
        store_untouched()

    @pytest.mark.parametrize("method", ["POST", "PUT", "DELETE"])
    async def test_mutation_verbs_rejected(self, test_client, store_untouched, movie_id, method):
        response = await test_client.request(method, f"/api/movies/{movie_id}/comments")

        assert response.json()["status"] == 405
        store_untouched()


class TestGetComment:

    async def test_matches_both_ids(self, test_client, collections, movie_id, comment_id):
        collections["comments"].find_one.return_value = {
            "_id": ObjectId(comment_id),
            "movie_id": ObjectId(movie_id),
            "text": "Perspiciatis sequi nesciunt",
        }

        response = await test_client.get(f"/api/movies/{movie_id}/comments/{comment_id}")

        assert response.json() == {
            "status": 200,
            "data": {"_id": comment_id, "movie_id": movie_id, "text": "Perspiciatis sequi nesciunt"},
        }
        collections["comments"].find_one.assert_awaited_once_with(
            {"_id": ObjectId(comment_id), "movie_id": ObjectId(movie_id)}
        )

    async def test_not_found(self, test_client, movie_id, comment_id):
        response = await test_client.get(f"/api/movies/{movie_id}/comments/{comment_id}")

        assert response.status_code == 404
        assert response.json() == {"status": 404, "message": "Comment not found"}

    @pytest.mark.parametrize("path", [
        "/api/movies/bad/comments/5a9427648b0beebeb6957a88",
        "/api/movies/573a1390f29313caabcd680a/comments/bad",
    ])
    async def test_malformed_ids(self, test_client, store_untouched, path):
        response = await test_client.get(path)

        assert response.json() == {"status": 400, "message": "Invalid ID format"}
        store_untouched()


class TestCreateComment:

    async def test_sentinel_creates_placeholder(self, test_client, collections, movie_id):
        new_id = ObjectId()
        collections["comments"].insert_one.return_value = MagicMock(inserted_id=new_id)

        response = await test_client.post(f"/api/movies/{movie_id}/comments/null")

        assert response.status_code == 201
        assert response.json() == {
            "status": 201,
            "message": "Comment created successfully",
            "data": {"insertedId": str(new_id)},
        }
        inserted = collections["comments"].insert_one.await_args.args[0]
        assert inserted["movie_id"] == ObjectId(movie_id)
        assert inserted["name"] == "test"
        assert inserted["email"] == "test"
        assert inserted["text"] == "test"
        assert isinstance(inserted["date"], datetime)

    @pytest.mark.parametrize("segment", ["NULL", "None", "nul", "5a9427648b0beebeb6957a88"])
    async def test_other_segments_rejected(self, test_client, store_untouched, movie_id, segment):
        response = await test_client.post(f"/api/movies/{movie_id}/comments/{segment}")

        assert response.json() == {"status": 400, "message": "POST must target /comments/null only"}
        store_untouched()

    async def test_sentinel_checked_before_movie_id(self, test_client, store_untouched):
        response = await test_client.post("/api/movies/bad/comments/other")

        assert response.json()["message"] == "POST must target /comments/null only"
        store_untouched()

    async def test_malformed_movie_id(self, test_client, store_untouched):
        response = await test_client.post("/api/movies/bad/comments/null")

        assert response.json() == {"status": 400, "message": "Invalid movie ID format"}
        store_untouched()


class TestUpdateComment:

    async def test_sets_text_from_body(self, test_client, collections, movie_id, comment_id):
        collections["comments"].update_one.return_value = MagicMock(matched_count=1)

        response = await test_client.put(
            f"/api/movies/{movie_id}/comments/{comment_id}",
            json={"text": "Updated comment text here."},
        )

        assert response.json() == {"status": 200, "message": "Comment updated successfully"}
        collections["comments"].update_one.assert_awaited_once_with(
            {"_id": ObjectId(comment_id), "movie_id": ObjectId(movie_id)},
            {"$set": {"text": "Updated comment text here."}},
        )

    async def test_not_found(self, test_client, movie_id, comment_id):
        response = await test_client.put(
            f"/api/movies/{movie_id}/comments/{comment_id}", json={"text": "x"}
        )
        assert response.json() == {"status": 404, "message": "Comment not found"}

    async def test_malformed_id(self, test_client, store_untouched, movie_id):
        response = await test_client.put(f"/api/movies/{movie_id}/comments/bad", json={"text": "x"})

        assert response.json() == {"status": 400, "message": "Invalid ID format"}
        store_untouched()

    async def test_missing_body_is_rejected(self, test_client, store_untouched, movie_id, comment_id):
        response = await test_client.put(f"/api/movies/{movie_id}/comments/{comment_id}")

        assert response.status_code == 422
        store_untouched()


class TestDeleteComment:

    async def test_delete_twice(self, test_client, collections, movie_id, comment_id):
        collections["comments"].delete_one = AsyncMock(side_effect=[
            MagicMock(deleted_count=1),
            MagicMock(deleted_count=0),
        ])

        first = await test_client.delete(f"/api/movies/{movie_id}/comments/{comment_id}")
        second = await test_client.delete(f"/api/movies/{movie_id}/comments/{comment_id}")

        assert first.json() == {"status": 200, "message": "Comment deleted successfully"}
        assert second.json() == {"status": 404, "message": "Comment not found"}
        collections["comments"].delete_one.assert_awaited_with(
            {"_id": ObjectId(comment_id), "movie_id": ObjectId(movie_id)}
        )

    async def test_store_failure(self, test_client, collections, movie_id, comment_id):
        collections["comments"].delete_one.side_effect = PyMongoError("boom")

        response = await test_client.delete(f"/api/movies/{movie_id}/comments/{comment_id}")

        assert response.json() == {"status": 500, "message": "Internal Server Error", "error": "boom"}
