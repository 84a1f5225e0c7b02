# app/api/endpoints/movies.py

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.api.deps import get_db
from app.models.envelope import Envelope
from app.services.movie_service import MovieService, MovieNotFoundError
from app.utils.helpers import (
    InvalidObjectIdError,
    envelope_response,
    internal_error,
    method_not_allowed,
)

logger = logging.getLogger(__name__)
router = APIRouter()

INVALID_ID = {"message": "Invalid movie ID", "error": "ID format is incorrect"}

# --- Dependency to get the service ---
def get_movie_service(db: AsyncIOMotorDatabase = Depends(get_db)) -> MovieService:
    return MovieService(db=db)
# --- ---

@router.get(
    "", # GET /api/movies
    response_model=Envelope,
    summary="List Movies",
    description="Retrieve up to the configured limit of movies, in store order.",
)
async def list_movies(movie_service: MovieService = Depends(get_movie_service)) -> JSONResponse:
    try:
        movies = await movie_service.list_movies()
        return envelope_response(status.HTTP_200_OK, data=movies)
    except Exception as e:
        logger.error(f"Error listing movies: {e}", exc_info=True)
        return internal_error(e)

@router.api_route(
    "",
    methods=["POST", "PUT", "DELETE"],
    response_model=Envelope,
    summary="Not supported",
    description="Mutation verbs are only available on a single movie.",
)
async def movies_collection_not_allowed(request: Request) -> JSONResponse:
    return method_not_allowed(request.method)

@router.get(
    "/{movie_id}", # GET /api/movies/{movie_id}
    response_model=Envelope,
    summary="Get Movie",
    description="Retrieve a specific movie by its ID.",
)
async def get_movie(
    movie_id: str,
    movie_service: MovieService = Depends(get_movie_service),
) -> JSONResponse:
    try:
        movie = await movie_service.get_movie(movie_id)
        return envelope_response(status.HTTP_200_OK, data={"movie": movie})
    except InvalidObjectIdError:
        return envelope_response(status.HTTP_400_BAD_REQUEST, **INVALID_ID)
    except MovieNotFoundError:
        return envelope_response(
            status.HTTP_404_NOT_FOUND,
            message="Movie not found",
            error="No movie found with the given ID",
        )
    except Exception as e:
        logger.error(f"Error getting movie {movie_id}: {e}", exc_info=True)
        return internal_error(e)

@router.post(
    "/{movie_id}", # POST /api/movies/{movie_id}
    response_model=Envelope,
    summary="Create Movie",
    description="Insert a placeholder movie. The path ID is accepted but not used; the store assigns the new ID.",
)
async def create_movie(
    movie_id: str,
    movie_service: MovieService = Depends(get_movie_service),
) -> JSONResponse:
    try:
        inserted_id = await movie_service.create_movie()
        return envelope_response(
            status.HTTP_201_CREATED,
            message="Movie successfully added",
            data={"insertedId": inserted_id},
        )
    except Exception as e:
        logger.error(f"Error creating movie: {e}", exc_info=True)
        return internal_error(e)

@router.put(
    "/{movie_id}", # PUT /api/movies/{movie_id}
    response_model=Envelope,
    summary="Update Movie",
    description="Replace the movie fields with the fixed update payload.",
)
async def update_movie(
    movie_id: str,
    movie_service: MovieService = Depends(get_movie_service),
) -> JSONResponse:
    try:
        await movie_service.update_movie(movie_id)
        return envelope_response(
            status.HTTP_200_OK,
            message="Movie successfully updated",
            data={"updatedId": movie_id},
        )
    except InvalidObjectIdError:
        return envelope_response(status.HTTP_400_BAD_REQUEST, **INVALID_ID)
    except MovieNotFoundError:
        return envelope_response(
            status.HTTP_404_NOT_FOUND,
            message="Movie not found",
            error="No movie to update with the given ID",
        )
    except Exception as e:
        logger.error(f"Error updating movie {movie_id}: {e}", exc_info=True)
        return internal_error(e)

@router.delete(
    "/{movie_id}", # DELETE /api/movies/{movie_id}
    response_model=Envelope,
    summary="Delete Movie",
    description="Delete a specific movie. Its comments are not removed.",
)
async def delete_movie(
    movie_id: str,
    movie_service: MovieService = Depends(get_movie_service),
) -> JSONResponse:
    try:
        await movie_service.delete_movie(movie_id)
        return envelope_response(status.HTTP_200_OK, message="Movie successfully deleted")
    except InvalidObjectIdError:
        return envelope_response(status.HTTP_400_BAD_REQUEST, **INVALID_ID)
    except MovieNotFoundError:
        return envelope_response(
            status.HTTP_404_NOT_FOUND,
            message="Movie not found",
            error="No movie deleted",
        )
    except Exception as e:
        logger.error(f"Error deleting movie {movie_id}: {e}", exc_info=True)
        return internal_error(e)
