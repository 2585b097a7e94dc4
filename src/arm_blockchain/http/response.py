from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class HttpResponse:
    """HTTP response data as seen by the dispatcher."""

    status_code: int
    text: str = ""
    status_message: str = ""
    headers: Dict[str, str] = field(default_factory=dict)
