"""Exception handlers mapping domain errors to HTTP responses."""

import logging
import time
from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse

from voicestore.domain.exceptions import (
    StorageError,
    ValidationError,
    VoiceprintNotFoundError,
)

logger = logging.getLogger(__name__)


def create_message_response(success: bool, message: str) -> dict[str, Any]:
    """Create the response envelope used for messages and errors."""
    return {
        "success": success,
        "message": message,
        "timestamp": int(time.time() * 1000),
    }


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Convert ValidationError to a 400 response."""
    assert isinstance(exc, ValidationError)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=create_message_response(False, str(exc)),
    )


async def not_found_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Convert VoiceprintNotFoundError to a 404 response."""
    assert isinstance(exc, VoiceprintNotFoundError)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=create_message_response(False, str(exc)),
    )


async def storage_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert StorageError to a 500 response."""
    assert isinstance(exc, StorageError)
    logger.error(f"Storage failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=create_message_response(False, f"File operation failed: {exc}"),
    )


def register_exception_handlers(app: Any) -> None:
    """Register domain exception handlers on an application."""
    app.add_exception_handler(ValidationError, validation_exception_handler)
    app.add_exception_handler(VoiceprintNotFoundError, not_found_exception_handler)
    app.add_exception_handler(StorageError, storage_exception_handler)
