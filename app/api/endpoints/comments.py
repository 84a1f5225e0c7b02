# app/api/endpoints/comments.py
# Comments are nested under their movie: /api/movies/{movie_id}/comments

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.api.deps import get_db
from app.models.comment import CommentUpdate, NEW_COMMENT_SENTINEL
from app.models.envelope import Envelope
from app.services.comment_service import (
    CommentService,
    CommentNotFoundError,
    SentinelMismatchError,
)
from app.utils.helpers import (
    InvalidObjectIdError,
    envelope_response,
    internal_error,
    method_not_allowed,
)

logger = logging.getLogger(__name__)
router = APIRouter()

def get_comment_service(db: AsyncIOMotorDatabase = Depends(get_db)) -> CommentService:
    return CommentService(db=db)

def _invalid_id() -> JSONResponse:
    return envelope_response(status.HTTP_400_BAD_REQUEST, message="Invalid ID format")

def _not_found() -> JSONResponse:
    return envelope_response(status.HTTP_404_NOT_FOUND, message="Comment not found")

@router.get(
    "/{movie_id}/comments",
    response_model=Envelope,
    summary="List Comments of a Movie",
    description="Retrieve up to the configured limit of comments referencing the movie.",
)
async def list_comments(
    movie_id: str,
    comment_service: CommentService = Depends(get_comment_service),
) -> JSONResponse:
    try:
        comments = await comment_service.list_comments(movie_id)
        return envelope_response(status.HTTP_200_OK, data=comments)
    except InvalidObjectIdError:
        return envelope_response(
            status.HTTP_400_BAD_REQUEST,
            message="Invalid movie ID",
            error="ID format is incorrect",
        )
    except Exception as e:
        logger.error(f"Error listing comments for movie {movie_id}: {e}", exc_info=True)
        return internal_error(e)

@router.api_route(
    "/{movie_id}/comments",
    methods=["POST", "PUT", "DELETE"],
    response_model=Envelope,
    summary="Not supported",
)
async def comments_collection_not_allowed(movie_id: str, request: Request) -> JSONResponse:
    return method_not_allowed(request.method)

@router.get(
    "/{movie_id}/comments/{comment_id}",
    response_model=Envelope,
    summary="Get Comment",
    description="Retrieve a comment matching both the comment ID and the movie ID.",
)
async def get_comment(
    movie_id: str,
    comment_id: str,
    comment_service: CommentService = Depends(get_comment_service),
) -> JSONResponse:
    try:
        comment = await comment_service.get_comment(movie_id, comment_id)
        return envelope_response(status.HTTP_200_OK, data=comment)
    except InvalidObjectIdError:
        return _invalid_id()
    except CommentNotFoundError:
        return _not_found()
    except Exception as e:
        logger.error(f"Error getting comment {comment_id} of movie {movie_id}: {e}", exc_info=True)
        return internal_error(e)

@router.post(
    "/{movie_id}/comments/{comment_id}",
    response_model=Envelope,
    summary="Create Comment",
    description=f'Insert a placeholder comment on the movie. The comment ID segment must be "{NEW_COMMENT_SENTINEL}".',
)
async def create_comment(
    movie_id: str,
    comment_id: str,
    comment_service: CommentService = Depends(get_comment_service),
) -> JSONResponse:
    try:
        inserted_id = await comment_service.create_comment(movie_id, comment_id)
        return envelope_response(
            status.HTTP_201_CREATED,
            message="Comment created successfully",
            data={"insertedId": inserted_id},
        )
    except SentinelMismatchError:
        return envelope_response(
            status.HTTP_400_BAD_REQUEST,
            message=f"POST must target /comments/{NEW_COMMENT_SENTINEL} only",
        )
    except InvalidObjectIdError:
        return envelope_response(status.HTTP_400_BAD_REQUEST, message="Invalid movie ID format")
    except Exception as e:
        logger.error(f"Error creating comment for movie {movie_id}: {e}", exc_info=True)
        return internal_error(e)

@router.put(
    "/{movie_id}/comments/{comment_id}",
    response_model=Envelope,
    summary="Update Comment",
    description="Replace the text of a comment matching both IDs.",
)
async def update_comment(
    movie_id: str,
    comment_id: str,
    payload: CommentUpdate,
    comment_service: CommentService = Depends(get_comment_service),
) -> JSONResponse:
    try:
        await comment_service.update_comment(movie_id, comment_id, payload.text)
        return envelope_response(status.HTTP_200_OK, message="Comment updated successfully")
    except InvalidObjectIdError:
        return _invalid_id()
    except CommentNotFoundError:
        return _not_found()
    except Exception as e:
        logger.error(f"Error updating comment {comment_id} of movie {movie_id}: {e}", exc_info=True)
        return internal_error(e)

@router.delete(
    "/{movie_id}/comments/{comment_id}",
    response_model=Envelope,
    summary="Delete Comment",
)
async def delete_comment(
    movie_id: str,
    comment_id: str,
    comment_service: CommentService = Depends(get_comment_service),
) -> JSONResponse:
    try:
        await comment_service.delete_comment(movie_id, comment_id)
        return envelope_response(status.HTTP_200_OK, message="Comment deleted successfully")
    except InvalidObjectIdError:
        return _invalid_id()
    except CommentNotFoundError:
        return _not_found()
    except Exception as e:
        logger.error(f"Error deleting comment {comment_id} of movie {movie_id}: {e}", exc_info=True)
        return internal_error(e)
