from __future__ import annotations

from typing import Optional, Protocol

import requests

from arm_blockchain.__version__ import __version__
from arm_blockchain.core.errors import TransportError
from arm_blockchain.core.models import RequestSpec
from arm_blockchain.http.response import HttpResponse
from arm_blockchain.utils.logging import get_logger

DEFAULT_USER_AGENT = f"arm-blockchain/{__version__}"


class HttpClient(Protocol):
    """Protocol for HTTP transports."""

    def send(self, req: RequestSpec) -> HttpResponse: ...


class RequestsHttpClient:
    """HTTP transport using the requests library. Sends each request exactly once."""

    def __init__(self, timeout_s: float = 30, user_agent: Optional[str] = None):
        self.session = requests.Session()
        self.session.headers["User-Agent"] = user_agent or DEFAULT_USER_AGENT
        self.timeout_s = timeout_s
        self.log = get_logger("arm_blockchain.http")

    def send(self, req: RequestSpec) -> HttpResponse:
        """Send an HTTP request, raising TransportError if no response arrives."""
        try:
            r = self.session.request(
                method=req.method,
                url=req.url,
                headers=req.headers,
                data=req.body.encode("utf-8") if req.body is not None else None,
                timeout=self.timeout_s,
            )
        except requests.RequestException as e:
            self.log.warning("Request to %s failed (exception=%s)", req.url, type(e).__name__)
            raise TransportError(str(e)) from e

        # ARM always answers in UTF-8 JSON, even when the charset is omitted
        if "charset=" not in r.headers.get("Content-Type", "").lower():
            r.encoding = "utf-8"

        return HttpResponse(
            status_code=r.status_code,
            text=r.text,
            status_message=r.reason or "",
            headers=dict(r.headers),
        )
