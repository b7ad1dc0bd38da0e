"""
Client-side helpers around the verification API.
"""

from collections.abc import Mapping
from typing import Any

from shared.logging import get_logger
from .adapters.auth_api import AuthAPI
from .domain.models import Blob, UploadFile

logger = get_logger("verification.utils")

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


def blob_to_file(blob: Blob, file_name: str) -> UploadFile:
    """Name a blob so it can be uploaded, keeping its media type."""
    return UploadFile(filename=file_name, content=blob.content, content_type=blob.content_type)


async def check_api_health(auth_api: AuthAPI) -> bool:
    """Return True when the health check succeeds, False on any failure."""
    try:
        await auth_api.health_check()
        return True
    except Exception as exc:
        logger.error("API health check failed", error=str(exc))
        return False


def format_error_message(error: Any) -> str:
    """Best-effort display string for an arbitrary error value."""
    body = getattr(error, "body", None)
    if isinstance(body, Mapping) and body.get("message"):
        return str(body["message"])

    if isinstance(error, Mapping):
        message = error.get("message")
    else:
        message = getattr(error, "message", None)
        if not message and isinstance(error, BaseException):
            message = str(error)
    if message:
        return str(message)

    return UNEXPECTED_ERROR_MESSAGE
