"""
Data model for the verification client.

Wire names are kept as the service sends them (camelCase), so models
declare aliases and are dumped with ``by_alias=True``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from shared.config import REQUEST_TIMEOUT_SECONDS
from shared.errors import TransportFailure


@dataclass(frozen=True)
class Blob:
    """Raw binary content with its media type."""
    content: bytes
    content_type: str = "application/octet-stream"


@dataclass(frozen=True)
class UploadFile:
    """A named file ready to be sent as a multipart field."""
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"

    def as_multipart(self):
        return (self.filename, self.content, self.content_type)


class RequestEnvelope(BaseModel):
    """One request to the remote service. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    path: str
    method: Literal["GET", "POST"] = "GET"
    json_body: Optional[Dict[str, Any]] = None
    files: Optional[Dict[str, UploadFile]] = None
    timeout: float = REQUEST_TIMEOUT_SECONDS

    @property
    def is_multipart(self) -> bool:
        return bool(self.files)


class RawServiceResponse(BaseModel):
    """Envelope returned by every endpoint: ``{success, message, data?}``."""

    model_config = ConfigDict(extra="allow")

    success: bool
    message: Optional[str] = None
    data: Any = None


class UserRegistrationRequest(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    email: str
    password: str
    full_name: Optional[str] = Field(default=None, alias="fullName")
    nic_number: Optional[str] = Field(default=None, alias="nicNumber")
    phone_number: Optional[str] = Field(default=None, alias="phoneNumber")

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class LoginRequest(BaseModel):
    email: str
    password: str

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump()


class AuthenticationResponse(BaseModel):
    """The ``data`` payload of a successful login."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    token: Optional[str] = None
    user_id: Optional[str] = Field(default=None, alias="userId")
    email: Optional[str] = None


class VerificationDetail(BaseModel):
    """
    Nested detail of a NIC verification outcome.

    The typed fields are the ones the UI relies on; anything else the
    service sends (document number, confidence score, ...) is kept in the
    extension bag untouched.
    """

    model_config = ConfigDict(extra="allow")

    success: bool
    message: Optional[str] = None
    error: Optional[str] = None
    user_message: Optional[str] = Field(default=None, alias="userMessage")
    suggestions: Optional[List[str]] = None
    technical_error: Optional[str] = Field(default=None, alias="technicalError")

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "VerificationDetail":
        """
        Build a detail from wire-named keys without validating them.

        Values are kept exactly as given, so an off-type field from the
        service is passed through rather than coerced or rejected.
        """
        by_alias = {field.alias or name: name for name, field in cls.model_fields.items()}
        known: Dict[str, Any] = {}
        extra: Dict[str, Any] = {}
        for key, value in payload.items():
            if key in by_alias:
                known[key] = value
            else:
                extra[key] = value
        fields_set = {by_alias[key] for key in known} | set(extra)
        detail = cls.model_construct(_fields_set=fields_set, **known)
        detail.__pydantic_extra__.update(extra)
        return detail

    @property
    def extensions(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})


class VerificationOutcome(BaseModel):
    """Canonical result of a NIC verification call."""

    success: bool
    message: Optional[str] = None
    data: VerificationDetail

    def to_dict(self) -> Dict[str, Any]:
        """Wire-shaped dict; fields nobody set are left out."""
        return self.model_dump(by_alias=True, exclude_unset=True, warnings=False)


@dataclass(frozen=True)
class VerificationSuccess:
    response: RawServiceResponse


@dataclass(frozen=True)
class VerificationFailure:
    failure: TransportFailure


VerificationResult = Union[VerificationSuccess, VerificationFailure]
