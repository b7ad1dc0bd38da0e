"""
Shared error handling for the verification client layer.
"""

from typing import Dict, Any, Optional


class AccessLayerException(Exception):
    """Base exception for the client layer."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(AccessLayerException):
    """Invalid or missing client configuration."""

    def __init__(self, message: str = "Invalid configuration", details: Optional[Dict[str, Any]] = None):
        super().__init__("CONFIGURATION_ERROR", message, details)


class TransportFailure(AccessLayerException):
    """
    A request did not complete as expected.

    Raised for timeouts, unreachable hosts, HTTP error statuses and
    unparseable bodies. ``body`` holds the service's own JSON object when
    the failed response carried one; ``diagnostic`` is always the
    low-level description of what went wrong.
    """

    def __init__(
        self,
        diagnostic: str,
        *,
        status_code: Optional[int] = None,
        body: Optional[Dict[str, Any]] = None,
        code: str = "TRANSPORT_FAILURE",
    ):
        self.diagnostic = diagnostic
        self.status_code = status_code
        self.body = body
        details: Dict[str, Any] = {}
        if status_code is not None:
            details["status_code"] = status_code
        if body is not None:
            details["body"] = body
        super().__init__(code, diagnostic, details)

    @property
    def has_structured_body(self) -> bool:
        return bool(self.body)


class AuthorizationDeniedError(TransportFailure):
    """The service answered 401; the session has already been reset."""

    def __init__(self, diagnostic: str, *, body: Optional[Dict[str, Any]] = None):
        super().__init__(diagnostic, status_code=401, body=body, code="AUTHORIZATION_DENIED")
