from arm_blockchain.core.errors import (
    ConfigurationError,
    DeserializationError,
    ResourceClientError,
    TransportError,
    UnsuccessfulStatusError,
)
from arm_blockchain.core.models import ClientConfig, NameAvailability, RequestOptions, RequestSpec

__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "DeserializationError",
    "NameAvailability",
    "RequestOptions",
    "RequestSpec",
    "ResourceClientError",
    "TransportError",
    "UnsuccessfulStatusError",
]
