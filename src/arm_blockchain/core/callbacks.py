from __future__ import annotations

from typing import Any, Callable, Optional

from arm_blockchain.core.errors import ResourceClientError

Callback = Callable[..., None]


def call_with_callback(operation: Callable[..., Any], *args: Any, callback: Callback, **kwargs: Any) -> None:
    """
    Run a client operation and report its outcome error-first.

    `callback(None, result)` on success, `callback(error)` on a ResourceClientError.
    Other exceptions propagate unchanged.
    """
    error: Optional[ResourceClientError] = None
    try:
        result = operation(*args, **kwargs)
    except ResourceClientError as e:
        error = e

    if error is not None:
        callback(error)
    else:
        callback(None, result)
