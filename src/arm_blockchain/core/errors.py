from __future__ import annotations

from typing import Optional


class ResourceClientError(Exception):
    """Base class for every error raised by the resource client."""


class ConfigurationError(ResourceClientError):
    """A required construction parameter is missing or invalid."""


class TransportError(ResourceClientError):
    """The request never produced a response (network, TLS, DNS, timeout)."""


class UnsuccessfulStatusError(ResourceClientError):
    """
    A response arrived with a status code that is not accepted as success.
    The message is the raw response body.
    """

    def __init__(self, body: str, status_code: Optional[int] = None, status_message: str = ""):
        super().__init__(body)
        self.body = body
        self.status_code = status_code
        self.status_message = status_message


class DeserializationError(ResourceClientError):
    """The response body was not valid JSON."""
