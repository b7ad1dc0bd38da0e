"""
Tests for the client-side helpers.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from shared.errors import TransportFailure
from verification_client.app.domain.models import Blob
from verification_client.app.utils import (
    UNEXPECTED_ERROR_MESSAGE,
    blob_to_file,
    check_api_health,
    format_error_message,
)


def test_blob_to_file_keeps_media_type():
    upload = blob_to_file(Blob(b"\x89PNG", "image/png"), "capture.png")

    assert upload.filename == "capture.png"
    assert upload.content == b"\x89PNG"
    assert upload.content_type == "image/png"
    assert upload.as_multipart() == ("capture.png", b"\x89PNG", "image/png")


def test_blob_to_file_default_media_type():
    upload = blob_to_file(Blob(b"raw"), "blob.bin")

    assert upload.content_type == "application/octet-stream"


@pytest.mark.asyncio
async def test_check_api_health_true():
    auth_api = MagicMock()
    auth_api.health_check = AsyncMock(return_value={"success": True})

    assert await check_api_health(auth_api) is True


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [TransportFailure("timed out"), RuntimeError("boom")])
async def test_check_api_health_swallows_failures(error):
    auth_api = MagicMock()
    auth_api.health_check = AsyncMock(side_effect=error)

    assert await check_api_health(auth_api) is False


class TestFormatErrorMessage:

    def test_prefers_service_message(self):
        error = TransportFailure("Request failed with status code 400", body={"message": "Email taken"})

        assert format_error_message(error) == "Email taken"

    def test_falls_back_to_diagnostic(self):
        error = TransportFailure("Request failed with status code 400", body={"message": ""})

        assert format_error_message(error) == "Request failed with status code 400"

    def test_plain_exception(self):
        assert format_error_message(ValueError("bad value")) == "bad value"

    def test_mapping(self):
        assert format_error_message({"message": "from dict"}) == "from dict"

    @pytest.mark.parametrize("error", [None, 42, {}, Exception()])
    def test_unknown_values(self, error):
        assert format_error_message(error) == UNEXPECTED_ERROR_MESSAGE
