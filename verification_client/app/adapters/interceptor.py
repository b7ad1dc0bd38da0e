"""
Credential interceptor.

Installed on the transport's httpx client as request/response event
hooks: every outgoing request gets the stored bearer token, and every
401 clears the token and resets the session.
"""

import inspect
from typing import Any, Awaitable, Callable, Optional, Union

import httpx

from shared.logging import clear_user_context, get_logger
from ..session.credential_store import CredentialStore

SessionResetCallback = Callable[[str], Union[None, Awaitable[None]]]

LOGIN_PATH = "/login"


class CredentialInterceptor:
    """Attaches the bearer credential and reacts to authorization denials."""

    def __init__(
        self,
        credential_store: CredentialStore,
        on_session_reset: Optional[SessionResetCallback] = None,
        login_path: str = LOGIN_PATH,
    ):
        self.credential_store = credential_store
        self.on_session_reset = on_session_reset
        self.login_path = login_path
        self.logger = get_logger("verification.interceptor")

    async def on_request(self, request: httpx.Request) -> None:
        """Request hook. Leaves the request untouched when no token is stored."""
        token = self.credential_store.get_token()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"

    async def on_response(self, response: httpx.Response) -> None:
        """Response hook. The caller still gets the 401 afterwards."""
        if response.status_code == 401:
            self.logger.warning(
                "Authorization denied, resetting session",
                method=response.request.method,
                path=response.request.url.path,
            )
            await self.reset_session()

    async def reset_session(self) -> None:
        """Clear the credential and send the host back to the login entry point."""
        self.credential_store.clear_token()
        clear_user_context()
        if self.on_session_reset is None:
            self.logger.info("Session reset", redirect=self.login_path)
            return
        # Credential is already cleared; callback errors stop here.
        try:
            result: Any = self.on_session_reset(self.login_path)
            if inspect.isawaitable(result):
                await result
        except Exception:
            self.logger.exception("Session reset callback failed", redirect=self.login_path)

    def event_hooks(self):
        return {"request": [self.on_request], "response": [self.on_response]}
