"""
Domain models for the verification client.
"""

from .models import (
    AuthenticationResponse,
    Blob,
    LoginRequest,
    RawServiceResponse,
    RequestEnvelope,
    UploadFile,
    UserRegistrationRequest,
    VerificationDetail,
    VerificationFailure,
    VerificationOutcome,
    VerificationResult,
    VerificationSuccess,
)
from .normalizer import normalize_nic_verification

__all__ = [
    "AuthenticationResponse",
    "Blob",
    "LoginRequest",
    "RawServiceResponse",
    "RequestEnvelope",
    "UploadFile",
    "UserRegistrationRequest",
    "VerificationDetail",
    "VerificationFailure",
    "VerificationOutcome",
    "VerificationResult",
    "VerificationSuccess",
    "normalize_nic_verification",
]
