"""
Test helper functions and factory methods for the verification client.
"""

import json
from typing import Any, Callable, Dict, List, Optional, Tuple, Union
from dataclasses import dataclass, field

import httpx


@dataclass
class FakeCredentialStore:
    """Credential store that records every mutation."""
    token: Optional[str] = None
    calls: List[str] = field(default_factory=list)

    def get_token(self) -> Optional[str]:
        self.calls.append("get")
        return self.token

    def set_token(self, token: str) -> None:
        self.calls.append("set")
        self.token = token

    def clear_token(self) -> None:
        self.calls.append("clear")
        self.token = None


@dataclass
class RedirectRecorder:
    """Session-reset callback that remembers where it was sent."""
    redirects: List[str] = field(default_factory=list)

    def __call__(self, login_path: str) -> None:
        self.redirects.append(login_path)


Handler = Callable[[httpx.Request], httpx.Response]
RouteResult = Union[httpx.Response, Exception]


class ServiceStub:
    """
    In-process stand-in for the verification service.

    Routes are keyed by ``(method, path)``; each maps to a response, an
    exception to raise, or a callable producing either. Every request
    that reaches the stub is kept in ``requests``.
    """

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Union[RouteResult, Handler]] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, path: str, result: Union[RouteResult, Handler]) -> "ServiceStub":
        self.routes[(method.upper(), path)] = result
        return self

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        result = self.routes.get((request.method, request.url.path))
        if result is None:
            return json_response(404, {"success": False, "message": "Not found"})
        if callable(result) and not isinstance(result, (httpx.Response, Exception)):
            result = result(request)
        if isinstance(result, Exception):
            raise result
        return result

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


def json_response(status_code: int, payload: Any) -> httpx.Response:
    """Build a JSON response the way the service sends it."""
    return httpx.Response(
        status_code=status_code,
        content=json.dumps(payload),
        headers={"Content-Type": "application/json"},
    )


def service_response(
    success: bool = True,
    message: str = "OK",
    data: Any = None,
    status_code: int = 200,
) -> httpx.Response:
    """Build a ``{success, message, data}`` envelope response."""
    payload: Dict[str, Any] = {"success": success, "message": message}
    if data is not None:
        payload["data"] = data
    return json_response(status_code, payload)


def create_nic_detail(**overrides: Any) -> Dict[str, Any]:
    """Detail payload of a successful NIC verification."""
    detail = {
        "documentNumber": "199012345678",
        "confidence": 0.94,
        "faceMatch": True,
        "documentType": "NIC",
    }
    detail.update(overrides)
    return detail


def create_image_bytes(kind: str = "jpeg") -> bytes:
    """Small byte strings with the right magic number; content is never inspected."""
    if kind == "png":
        return b"\x89PNG\r\n\x1a\n" + b"\x00" * 16
    return b"\xff\xd8\xff\xe0" + b"\x00" * 16
