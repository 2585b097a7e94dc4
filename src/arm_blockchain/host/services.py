from __future__ import annotations

import webbrowser
from dataclasses import dataclass, field
from typing import Protocol

from arm_blockchain.utils.logging import get_logger


class TelemetrySink(Protocol):
    """Records exception events. Purely observational."""

    def send_exception(self, error: BaseException) -> None: ...


class NotificationSink(Protocol):
    """Surfaces an error message to a human operator."""

    def show_error_message(self, message: str) -> None: ...


class BrowserOpener(Protocol):
    """Opens a URL outside the process."""

    def open_external(self, url: str) -> None: ...


class LoggingTelemetry:
    """Telemetry sink that writes exception events to the log."""

    def __init__(self):
        self.log = get_logger("arm_blockchain.telemetry")

    def send_exception(self, error: BaseException) -> None:
        self.log.info("exception event: %s: %s", type(error).__name__, error)


class NullTelemetry:
    def send_exception(self, error: BaseException) -> None:
        return None


class LoggingNotifier:
    """Notification sink for headless hosts."""

    def __init__(self):
        self.log = get_logger("arm_blockchain.notify")

    def show_error_message(self, message: str) -> None:
        self.log.error("%s", message)


class WebBrowserOpener:
    def open_external(self, url: str) -> None:
        webbrowser.open(url)


@dataclass(frozen=True)
class HostServices:
    """Capabilities supplied by the host application."""

    telemetry: TelemetrySink = field(default_factory=LoggingTelemetry)
    notifier: NotificationSink = field(default_factory=LoggingNotifier)
    opener: BrowserOpener = field(default_factory=WebBrowserOpener)
