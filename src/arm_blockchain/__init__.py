from arm_blockchain.__version__ import __version__
from arm_blockchain.core.callbacks import call_with_callback
from arm_blockchain.core.client import ResourceClient
from arm_blockchain.core.errors import (
    ConfigurationError,
    DeserializationError,
    ResourceClientError,
    TransportError,
    UnsuccessfulStatusError,
)
from arm_blockchain.core.models import ClientConfig, NameAvailability, RequestOptions, RequestSpec
from arm_blockchain.host.services import HostServices
from arm_blockchain.http.credentials import BearerTokenCredentials, StaticTokenCredentials

__all__ = [
    "BearerTokenCredentials",
    "ClientConfig",
    "ConfigurationError",
    "DeserializationError",
    "HostServices",
    "NameAvailability",
    "RequestOptions",
    "RequestSpec",
    "ResourceClient",
    "ResourceClientError",
    "StaticTokenCredentials",
    "TransportError",
    "UnsuccessfulStatusError",
    "__version__",
    "call_with_callback",
]
