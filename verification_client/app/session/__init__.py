"""
Session state for the verification client.
"""

from .credential_store import CredentialStore, InMemoryCredentialStore

__all__ = ["CredentialStore", "InMemoryCredentialStore"]
