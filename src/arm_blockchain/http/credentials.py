from __future__ import annotations

from dataclasses import replace
from typing import Callable, Protocol

from arm_blockchain.core.constants import HEADER_AUTHORIZATION
from arm_blockchain.core.errors import ConfigurationError
from arm_blockchain.core.models import RequestSpec


class Credentials(Protocol):
    """Protocol for objects able to authorize an outgoing request."""

    def sign_request(self, req: RequestSpec) -> RequestSpec: ...


class BearerTokenCredentials:
    """
    Adds an `Authorization: Bearer <token>` header.
    The token getter is called once per request so refreshed tokens are picked up.
    """

    def __init__(self, token_getter: Callable[[], str]):
        self._token_getter = token_getter

    def sign_request(self, req: RequestSpec) -> RequestSpec:
        token = self._token_getter()
        if not token:
            raise ConfigurationError("Access token should be defined")
        headers = {**req.headers, HEADER_AUTHORIZATION: f"Bearer {token}"}
        return replace(req, headers=headers)


class StaticTokenCredentials(BearerTokenCredentials):
    """Bearer credentials around a fixed token."""

    def __init__(self, token: str):
        if not token:
            raise ConfigurationError("Access token should be defined")
        super().__init__(lambda: token)
