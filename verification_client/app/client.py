"""
Wiring for the verification client.
"""

from typing import Optional

import httpx

from shared.config import VerificationClientConfig, get_config
from shared.errors import ConfigurationError
from shared.logging import configure_logging, get_logger
from .adapters import AuthAPI, CredentialInterceptor, DiagnosticAPI, Transport
from .adapters.interceptor import SessionResetCallback
from .session.credential_store import CredentialStore, InMemoryCredentialStore


class VerificationClient:
    """Bundle of the API clients sharing one transport and credential store."""

    def __init__(
        self,
        transport: Transport,
        credential_store: CredentialStore,
    ):
        self.transport = transport
        self.credential_store = credential_store
        self.auth = AuthAPI(transport, credential_store)
        self.diagnostics = DiagnosticAPI(transport)

    async def close(self) -> None:
        await self.transport.close()

    async def __aenter__(self) -> "VerificationClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()


def create_client(
    config: Optional[VerificationClientConfig] = None,
    *,
    credential_store: Optional[CredentialStore] = None,
    on_session_reset: Optional[SessionResetCallback] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> VerificationClient:
    """Build a client from configuration."""
    config = config or get_config()
    if not config.api_url.startswith(("http://", "https://")):
        raise ConfigurationError(
            "API URL must be an http(s) address",
            details={"api_url": config.api_url},
        )
    configure_logging("verification", config.log_level)
    if credential_store is None:
        credential_store = InMemoryCredentialStore(config.auth_token_key)
    interceptor = CredentialInterceptor(
        credential_store,
        on_session_reset=on_session_reset,
        login_path=config.login_path,
    )
    http = Transport(
        config.api_url,
        interceptor,
        timeout=config.request_timeout,
        transport=transport,
    )
    get_logger("verification.client").debug("Verification client created", api_url=config.api_url)
    return VerificationClient(http, credential_store)
