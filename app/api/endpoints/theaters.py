# app/api/endpoints/theaters.py

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.api.deps import get_db
from app.models.envelope import Envelope
from app.services.theater_service import TheaterService, TheaterNotFoundError
from app.utils.helpers import (
    InvalidObjectIdError,
    envelope_response,
    internal_error,
    method_not_allowed,
)

logger = logging.getLogger(__name__)
router = APIRouter()

INVALID_ID = {"message": "Invalid theater ID", "error": "ID format is incorrect"}

def get_theater_service(db: AsyncIOMotorDatabase = Depends(get_db)) -> TheaterService:
    return TheaterService(db=db)

@router.get("", response_model=Envelope, summary="List Theaters")
async def list_theaters(theater_service: TheaterService = Depends(get_theater_service)) -> JSONResponse:
    try:
        theaters = await theater_service.list_theaters()
        return envelope_response(status.HTTP_200_OK, data=theaters)
    except Exception as e:
        logger.error(f"Error listing theaters: {e}", exc_info=True)
        return internal_error(e)

@router.api_route("", methods=["POST", "PUT", "DELETE"], response_model=Envelope, summary="Not supported")
async def theaters_collection_not_allowed(request: Request) -> JSONResponse:
    return method_not_allowed(request.method)

@router.get("/{theater_id}", response_model=Envelope, summary="Get Theater")
async def get_theater(
    theater_id: str,
    theater_service: TheaterService = Depends(get_theater_service),
) -> JSONResponse:
    try:
        theater = await theater_service.get_theater(theater_id)
        return envelope_response(status.HTTP_200_OK, data={"theater": theater})
    except InvalidObjectIdError:
        return envelope_response(status.HTTP_400_BAD_REQUEST, **INVALID_ID)
    except TheaterNotFoundError:
        return envelope_response(
            status.HTTP_404_NOT_FOUND,
            message="Theater not found",
            error="No theater found with the given ID",
        )
    except Exception as e:
        logger.error(f"Error getting theater {theater_id}: {e}", exc_info=True)
        return internal_error(e)

@router.post(
    "/{theater_id}",
    response_model=Envelope,
    summary="Create Theater",
    description="Insert a placeholder theater. The path ID is not used.",
)
async def create_theater(
    theater_id: str,
    theater_service: TheaterService = Depends(get_theater_service),
) -> JSONResponse:
    try:
        inserted_id = await theater_service.create_theater()
        return envelope_response(
            status.HTTP_201_CREATED,
            message="Theater successfully added",
            data={"insertedId": inserted_id},
        )
    except Exception as e:
        logger.error(f"Error creating theater: {e}", exc_info=True)
        return internal_error(e)

@router.put("/{theater_id}", response_model=Envelope, summary="Update Theater")
async def update_theater(
    theater_id: str,
    theater_service: TheaterService = Depends(get_theater_service),
) -> JSONResponse:
    try:
        await theater_service.update_theater(theater_id)
        return envelope_response(
            status.HTTP_200_OK,
            message="Theater successfully updated",
            data={"updatedId": theater_id},
        )
    except InvalidObjectIdError:
        return envelope_response(status.HTTP_400_BAD_REQUEST, **INVALID_ID)
    except TheaterNotFoundError:
        return envelope_response(
            status.HTTP_404_NOT_FOUND,
            message="Theater not found",
            error="No theater to update with the given ID",
        )
    except Exception as e:
        logger.error(f"Error updating theater {theater_id}: {e}", exc_info=True)
        return internal_error(e)

@router.delete("/{theater_id}", response_model=Envelope, summary="Delete Theater")
async def delete_theater(
    theater_id: str,
    theater_service: TheaterService = Depends(get_theater_service),
) -> JSONResponse:
    try:
        await theater_service.delete_theater(theater_id)
        return envelope_response(status.HTTP_200_OK, message="Theater successfully deleted")
    except InvalidObjectIdError:
        return envelope_response(status.HTTP_400_BAD_REQUEST, **INVALID_ID)
    except TheaterNotFoundError:
        return envelope_response(
            status.HTTP_404_NOT_FOUND,
            message="Theater not found",
            error="No theater deleted",
        )
    except Exception as e:
        logger.error(f"Error deleting theater {theater_id}: {e}", exc_info=True)
        return internal_error(e)
