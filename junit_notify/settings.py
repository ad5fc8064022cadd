"""Typed configuration backed by python-decouple."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from decouple import Config as DecoupleConfig, RepositoryEmpty, RepositoryEnv, UndefinedValueError

from junit_notify.errors import ConfigurationError

__all__ = [
    "DEFAULT_TITLE",
    "NotifySettings",
    "load_config",
    "load_settings",
]

DEFAULT_TITLE: Final = "Test Results"
DEFAULT_TIMEOUT_SECONDS: Final = 10.0
DEFAULT_LOG_LEVEL: Final = "WARNING"
_LOG_LEVELS: Final = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class NotifySettings:
    """Everything a run needs, resolved once at process start."""

    webhook_url: str
    title: str = DEFAULT_TITLE
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    log_level: str = DEFAULT_LOG_LEVEL


def load_config(env_path: str = ".env") -> DecoupleConfig:
    """Return a decouple config; process env wins, then ``env_path`` if present."""

    if Path(env_path).exists():
        return DecoupleConfig(RepositoryEnv(env_path))
    return DecoupleConfig(RepositoryEmpty())


def load_settings(env_path: str = ".env", *, cfg: DecoupleConfig | None = None) -> NotifySettings:
    cfg = cfg or load_config(env_path)

    try:
        webhook_url = cfg("SLACK_WEBHOOK_URL")
    except UndefinedValueError as exc:
        raise ConfigurationError("SLACK_WEBHOOK_URL environment variable not set") from exc
    webhook_url = (webhook_url or "").strip()
    if not webhook_url:
        raise ConfigurationError("SLACK_WEBHOOK_URL environment variable not set")

    title = cfg("SLACK_MESSAGE_TITLE", default=DEFAULT_TITLE)
    try:
        timeout_seconds = cfg("SLACK_TIMEOUT_SECONDS", cast=float, default=DEFAULT_TIMEOUT_SECONDS)
    except ValueError as exc:
        raise ConfigurationError(f"SLACK_TIMEOUT_SECONDS must be a number ({exc})") from exc
    if timeout_seconds <= 0:
        raise ConfigurationError("SLACK_TIMEOUT_SECONDS must be positive")
    log_level = str(cfg("LOG_LEVEL", default=DEFAULT_LOG_LEVEL)).strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigurationError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")

    return NotifySettings(
        webhook_url=webhook_url,
        title=title,
        timeout_seconds=timeout_seconds,
        log_level=log_level,
    )
