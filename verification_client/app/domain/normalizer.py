"""
NIC verification result normalizer.

Turns whatever came back from ``/api/auth/verify-nic/{userId}`` into a
``VerificationOutcome`` the UI can render directly:

1. the service answered normally: its detail is authoritative and is
   passed through, with the top-level success/message repeated inside
   ``data``;
2. the request failed but the service still sent a JSON body: the
   failure is classified as ``SYSTEM_ERROR`` and any user-facing field
   the service left out is filled with a fixed fallback;
3. nothing usable came back (timeout, connection error, empty or
   non-JSON body): a fixed network-error outcome.

The normalizer never raises and holds no state, so the same input always
produces the same outcome.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Optional

from shared.errors import TransportFailure
from shared.logging import get_logger

from .models import (
    VerificationDetail,
    VerificationOutcome,
    VerificationResult,
    VerificationSuccess,
)

logger = get_logger("verification.normalizer")

SYSTEM_ERROR = "SYSTEM_ERROR"

NIC_FAILED_MESSAGE = "NIC verification failed"
SERVICE_FAILURE_USER_MESSAGE = "We encountered a technical issue while processing your verification."
SERVICE_FAILURE_SUGGESTIONS = (
    "Check your internet connection and try again",
    "Make sure your image file is not corrupted",
    "Try using a different image format (JPG or PNG)",
    "Contact support if the problem persists",
)

NETWORK_ERROR_MESSAGE = "Network error occurred"
NETWORK_FAILURE_USER_MESSAGE = (
    "Unable to connect to the server. Please check your internet connection and try again."
)
NETWORK_FAILURE_SUGGESTIONS = (
    "Check your internet connection",
    "Try again in a few moments",
    "Contact support if the problem persists",
)

# Pinned by the failure branches; the service detail cannot replace them.
_PINNED_FIELDS = ("success", "message", "error")
# Resolved with fallbacks before the merge.
_RESOLVED_FIELDS = ("userMessage", "suggestions", "technicalError")


def normalize_nic_verification(result: VerificationResult) -> VerificationOutcome:
    """Collapse a NIC verification result into the canonical outcome."""
    if isinstance(result, VerificationSuccess):
        return _from_service_response(result)

    failure = result.failure
    logger.error(
        "NIC verification API error",
        diagnostic=failure.diagnostic,
        status_code=failure.status_code,
        structured=failure.has_structured_body,
    )
    if failure.has_structured_body:
        return _from_service_failure(failure)
    return _from_network_failure(failure)


def _from_service_response(result: VerificationSuccess) -> VerificationOutcome:
    response = result.response
    detail: Dict[str, Any] = {"success": response.success, "message": response.message}
    if isinstance(response.data, Mapping):
        detail.update(response.data)

    return VerificationOutcome(
        success=response.success,
        message=response.message,
        data=VerificationDetail.from_payload(detail),
    )


def _from_service_failure(failure: TransportFailure) -> VerificationOutcome:
    body = failure.body or {}
    message = _text(body.get("message")) or NIC_FAILED_MESSAGE
    nested = body.get("data")
    if not isinstance(nested, Mapping):
        nested = {}

    detail: Dict[str, Any] = {
        "success": False,
        "message": message,
        "error": SYSTEM_ERROR,
        "userMessage": _text(nested.get("userMessage")) or SERVICE_FAILURE_USER_MESSAGE,
        "suggestions": _suggestions(nested.get("suggestions"), SERVICE_FAILURE_SUGGESTIONS),
        "technicalError": _diagnostic(nested.get("technicalError")) or failure.diagnostic,
    }
    for key, value in nested.items():
        if key in _PINNED_FIELDS or key in _RESOLVED_FIELDS:
            continue
        detail[key] = value

    return VerificationOutcome(
        success=False,
        message=message,
        data=VerificationDetail.from_payload(detail),
    )


def _from_network_failure(failure: TransportFailure) -> VerificationOutcome:
    detail = {
        "success": False,
        "message": NETWORK_ERROR_MESSAGE,
        "error": SYSTEM_ERROR,
        "userMessage": NETWORK_FAILURE_USER_MESSAGE,
        "suggestions": list(NETWORK_FAILURE_SUGGESTIONS),
        "technicalError": failure.diagnostic,
    }
    return VerificationOutcome(
        success=False,
        message=NETWORK_ERROR_MESSAGE,
        data=VerificationDetail.model_validate(detail),
    )


def _text(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


def _diagnostic(value: Any) -> Optional[str]:
    # Structured diagnostics are kept, serialized.
    if value is None or value == "" or value == {} or value == []:
        return None
    if isinstance(value, str):
        return value
    return json.dumps(value, sort_keys=True, default=str)


def _suggestions(value: Any, fallback) -> List[str]:
    if isinstance(value, (list, tuple)) and value:
        return [str(item) for item in value]
    return list(fallback)
