"""Exceptions surfaced by the notifier pipeline."""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "NotifyError",
    "ConfigurationError",
    "ReportReadError",
    "ReportParseError",
    "DeliveryError",
]


class NotifyError(RuntimeError):
    """Base class for every fatal error of a run."""


class ConfigurationError(NotifyError):
    """Required setting missing or unusable."""


class ReportReadError(NotifyError):
    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to read file {self.path}: {reason}")


class ReportParseError(NotifyError):
    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to parse JUnit XML {self.path}: {reason}")


class DeliveryError(NotifyError):
    """Webhook rejected the message or could not be reached.

    ``detail`` holds the response body when the endpoint answered, otherwise
    the transport error text.
    """

    def __init__(self, message: str, *, detail: str, status_code: int | None = None) -> None:
        self.detail = detail
        self.status_code = status_code
        super().__init__(message)
