from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from arm_blockchain.core.constants import (
    DEFAULT_ACCEPT_LANGUAGE,
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URI,
)
from arm_blockchain.core.errors import ConfigurationError


@dataclass(frozen=True)
class RequestOptions:
    """Per-client options applied to every outgoing request."""

    generate_client_request_id: bool = True
    accept_language: Optional[str] = DEFAULT_ACCEPT_LANGUAGE
    timeout_s: float = 30
    user_agent: Optional[str] = None


@dataclass(frozen=True)
class ClientConfig:
    """
    Immutable configuration for a ResourceClient.

    `credentials` is any object exposing `sign_request(request) -> RequestSpec`.
    """

    credentials: Any
    subscription_id: str
    resource_group: str = ""
    location: str = ""
    base_uri: str = DEFAULT_BASE_URI
    api_version: str = DEFAULT_API_VERSION
    request_options: RequestOptions = field(default_factory=RequestOptions)

    def __post_init__(self) -> None:
        if not self.credentials:
            raise ConfigurationError("Credentials should be defined")
        if not self.subscription_id:
            raise ConfigurationError("SubscriptionId should be defined")


@dataclass(frozen=True)
class RequestSpec:
    """Specification for an HTTP request."""

    url: str
    method: str = "GET"
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None


@dataclass(frozen=True)
class NameAvailability:
    """Result of a name availability check."""

    name_available: bool
    reason: str = ""
    message: Optional[str] = None

    @classmethod
    def from_json(cls, payload: Dict[str, Any]) -> "NameAvailability":
        return cls(
            name_available=bool(payload.get("nameAvailable", False)),
            reason=payload.get("reason") or "",
            message=payload.get("message"),
        )
