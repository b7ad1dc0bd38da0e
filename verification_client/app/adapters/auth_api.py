"""
Auth API client for the verification service.
"""

from typing import Mapping

from shared.logging import get_logger, set_user_context
from ..domain.models import (
    AuthenticationResponse,
    LoginRequest,
    RawServiceResponse,
    RequestEnvelope,
    UploadFile,
    UserRegistrationRequest,
    VerificationOutcome,
)
from ..domain.normalizer import normalize_nic_verification
from ..session.credential_store import CredentialStore
from .transport import Transport


class AuthAPI:
    """Client for the ``/api/auth`` endpoints."""

    def __init__(self, transport: Transport, credential_store: CredentialStore):
        self.transport = transport
        self.credential_store = credential_store
        self.logger = get_logger("verification.auth_api")

    async def health_check(self) -> RawServiceResponse:
        """Ask the service whether it is up."""
        return await self.transport.send(RequestEnvelope(path="/api/auth/health"))

    async def register(self, user_data: UserRegistrationRequest) -> RawServiceResponse:
        """Register a new user."""
        return await self.transport.send(
            RequestEnvelope(path="/api/auth/register", method="POST", json_body=user_data.to_payload())
        )

    async def login(self, credentials: LoginRequest) -> RawServiceResponse:
        """Log in and keep the returned bearer token for later calls."""
        response = await self.transport.send(
            RequestEnvelope(path="/api/auth/login", method="POST", json_body=credentials.to_payload())
        )
        if response.success and isinstance(response.data, Mapping):
            auth = AuthenticationResponse.model_validate(response.data)
            if auth.token:
                self.credential_store.set_token(auth.token)
                set_user_context(auth.user_id)
                self.logger.info("Login succeeded", user_id=auth.user_id)
        return response

    async def logout(self) -> None:
        """Drop the credential and reset the session."""
        await self.transport.interceptor.reset_session()

    async def verify_face(self, user_id: str, face_image: UploadFile) -> RawServiceResponse:
        """Submit a face image for the given user."""
        return await self.transport.send(
            RequestEnvelope(
                path=f"/api/auth/verify-face/{user_id}",
                method="POST",
                files={"faceImage": face_image},
            )
        )

    async def verify_nic(self, user_id: str, nic_image: UploadFile) -> VerificationOutcome:
        """
        Submit a NIC image for the given user.

        Never raises for a failed request: network errors and service
        failures come back as an outcome with ``success=False`` and a
        populated ``userMessage``/``suggestions``.
        """
        result = await self.transport.try_send(
            RequestEnvelope(
                path=f"/api/auth/verify-nic/{user_id}",
                method="POST",
                files={"nicImage": nic_image},
            )
        )
        return normalize_nic_verification(result)
