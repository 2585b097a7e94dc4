from arm_blockchain.host.services import (
    BrowserOpener,
    HostServices,
    LoggingNotifier,
    LoggingTelemetry,
    NotificationSink,
    NullTelemetry,
    TelemetrySink,
    WebBrowserOpener,
)

__all__ = [
    "BrowserOpener",
    "HostServices",
    "LoggingNotifier",
    "LoggingTelemetry",
    "NotificationSink",
    "NullTelemetry",
    "TelemetrySink",
    "WebBrowserOpener",
]
