"""
HTTP transport for the verification service.

Owns one ``httpx.AsyncClient`` bound to the service base URL with the
fixed request timeout. Successful JSON envelopes come back as
``RawServiceResponse``; everything else is raised as ``TransportFailure``.
Each request is sent exactly once.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from shared.config import REQUEST_TIMEOUT_SECONDS
from shared.errors import AuthorizationDeniedError, TransportFailure
from shared.logging import get_logger, request_context

from ..domain.models import (
    RawServiceResponse,
    RequestEnvelope,
    VerificationFailure,
    VerificationResult,
    VerificationSuccess,
)
from .interceptor import CredentialInterceptor


class Transport:
    """Async transport adapter with the credential interceptor installed."""

    def __init__(
        self,
        base_url: str,
        interceptor: CredentialInterceptor,
        *,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.interceptor = interceptor
        self.timeout = timeout
        self.logger = get_logger("verification.transport")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            event_hooks=interceptor.event_hooks(),
            transport=transport,
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "Transport":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def send(self, envelope: RequestEnvelope) -> RawServiceResponse:
        """Dispatch one request and return the parsed service envelope."""
        with request_context() as request_id:
            return await self._send(envelope, request_id)

    async def _send(self, envelope: RequestEnvelope, request_id: str) -> RawServiceResponse:
        kwargs: Dict[str, Any] = {"timeout": envelope.timeout}
        if envelope.files:
            kwargs["files"] = {name: upload.as_multipart() for name, upload in envelope.files.items()}
        elif envelope.json_body is not None:
            kwargs["json"] = envelope.json_body

        self.logger.debug(
            "Dispatching request",
            method=envelope.method,
            path=envelope.path,
            multipart=envelope.is_multipart,
            request_id=request_id,
        )

        try:
            response = await self._client.request(envelope.method, envelope.path, **kwargs)
        except httpx.HTTPError as exc:
            diagnostic = str(exc) or exc.__class__.__name__
            self.logger.warning("Request failed", path=envelope.path, error=diagnostic)
            raise TransportFailure(diagnostic) from exc

        body = _json_object(response)

        if response.is_error:
            diagnostic = f"Request failed with status code {response.status_code}"
            self.logger.warning(
                "Service returned error status",
                path=envelope.path,
                status_code=response.status_code,
                structured=body is not None,
            )
            if response.status_code == 401:
                raise AuthorizationDeniedError(diagnostic, body=body)
            raise TransportFailure(diagnostic, status_code=response.status_code, body=body)

        if body is None:
            raise TransportFailure(
                "Response body is not a JSON object",
                status_code=response.status_code,
            )

        try:
            return RawServiceResponse.model_validate(body)
        except ValidationError as exc:
            raise TransportFailure(
                f"Unexpected response envelope: {exc.error_count()} invalid field(s)",
                status_code=response.status_code,
            ) from exc

    async def try_send(self, envelope: RequestEnvelope) -> VerificationResult:
        """Like ``send`` but returns the failure instead of raising it."""
        try:
            return VerificationSuccess(response=await self.send(envelope))
        except TransportFailure as failure:
            return VerificationFailure(failure=failure)


def _json_object(response: httpx.Response) -> Optional[Dict[str, Any]]:
    if not response.content:
        return None
    try:
        data = response.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None
