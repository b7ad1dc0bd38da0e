"""
Adapters package for the verification client.

Contains the HTTP transport and the endpoint clients built on it:

- Base URL, timeout and request shapes
- Credential injection and 401 handling
- Error mapping to shared errors

Keep adapters thin and side-effect free outside of explicit calls.
"""

from .interceptor import CredentialInterceptor
from .transport import Transport
from .auth_api import AuthAPI
from .diagnostic_api import DiagnosticAPI

__all__ = [
    "CredentialInterceptor",
    "Transport",
    "AuthAPI",
    "DiagnosticAPI",
]
