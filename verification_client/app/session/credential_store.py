"""
Bearer credential storage.

The client never reads the token from ambient global state: a store is
handed to the interceptor and to the login/logout call paths, so a host
application can back it with whatever persistence it has and tests can
pass a fake.
"""

from __future__ import annotations

from typing import Dict, Optional, Protocol

from shared.logging import get_logger

AUTH_TOKEN_KEY = "authToken"


class CredentialStore(Protocol):
    """Read/write access to the current bearer token."""

    def get_token(self) -> Optional[str]:
        ...

    def set_token(self, token: str) -> None:
        ...

    def clear_token(self) -> None:
        ...


class InMemoryCredentialStore:
    """Process-wide token holder keyed by a fixed storage key."""

    def __init__(self, storage_key: str = AUTH_TOKEN_KEY, token: Optional[str] = None):
        self.storage_key = storage_key
        self._storage: Dict[str, str] = {}
        self.logger = get_logger("verification.credentials")
        if token:
            self.set_token(token)

    def get_token(self) -> Optional[str]:
        return self._storage.get(self.storage_key)

    def set_token(self, token: str) -> None:
        # A new login replaces whatever was there.
        self._storage[self.storage_key] = token
        self.logger.debug("Credential stored", key=self.storage_key)

    def clear_token(self) -> None:
        if self._storage.pop(self.storage_key, None) is not None:
            self.logger.debug("Credential cleared", key=self.storage_key)

    @property
    def has_token(self) -> bool:
        return self.storage_key in self._storage
