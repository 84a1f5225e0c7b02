# app/utils/helpers.py

import logging
from typing import Optional, Any

from bson import ObjectId
from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.models.envelope import Envelope

logger = logging.getLogger(__name__)

# --- Identifier Validation ---

def is_valid_object_id(value: Any) -> bool:
    """
    Checks whether a value is a syntactically valid MongoDB ObjectId string
    (24 hexadecimal characters). Existence in the store is not checked.

    Args:
        value: The candidate identifier, usually a path parameter.

    Returns:
        True if the value can be used as a store identifier.
    """
    return isinstance(value, str) and len(value) == 24 and ObjectId.is_valid(value)

class InvalidObjectIdError(ValueError):
    """Raised when an identifier is not a valid ObjectId string."""
    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Invalid ObjectId format: {value}")

def require_object_id(*values: Any) -> None:
    """Raises InvalidObjectIdError for the first value that is not a valid id."""
    for value in values:
        if not is_valid_object_id(value):
            logger.warning(f"Invalid ObjectId format: {value}")
            raise InvalidObjectIdError(value)

# --- Document Serialization ---

def serialize_document(value: Any) -> Any:
    """
    Recursively converts ObjectId values into strings so a raw store
    document can be JSON encoded. Other values are returned unchanged.
    """
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {key: serialize_document(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize_document(item) for item in value]
    return value

# --- Response Envelope ---

def envelope_response(
    status_code: int,
    message: Optional[str] = None,
    data: Any = None,
    error: Optional[str] = None,
) -> JSONResponse:
    """
    Builds the JSON envelope returned by every resource endpoint.

    Fields left as None are omitted from the body. The HTTP status matches
    the envelope status unless MIRROR_ENVELOPE_STATUS is disabled, in which
    case the response always travels as 200 and only the body carries it.

    Args:
        status_code: Status reported in the envelope.
        message: Optional human readable summary.
        data: Optional payload (documents are serialized first).
        error: Optional error detail.

    Returns:
        A JSONResponse carrying the envelope.
    """
    envelope = Envelope(
        status=status_code,
        message=message,
        data=serialize_document(data),
        error=error,
    )
    # Only top-level fields are dropped; nulls inside documents are kept
    body = {key: value for key, value in envelope.model_dump().items() if value is not None}
    transport_status = status_code if settings.MIRROR_ENVELOPE_STATUS else status.HTTP_200_OK
    return JSONResponse(status_code=transport_status, content=jsonable_encoder(body))

def method_not_allowed(method: str) -> JSONResponse:
    """Fixed response for mutation verbs sent to a collection endpoint."""
    logger.info(f"Rejected {method} on collection endpoint")
    return envelope_response(
        status.HTTP_405_METHOD_NOT_ALLOWED,
        message="Method Not Allowed",
        error=f"{method} method is not supported",
    )

def internal_error(e: Exception) -> JSONResponse:
    """500 envelope passing the underlying error message through."""
    return envelope_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        message="Internal Server Error",
        error=str(e),
    )
