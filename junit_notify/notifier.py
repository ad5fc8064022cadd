"""Deliver a formatted message to a Slack-style incoming webhook."""

from __future__ import annotations

import logging

import httpx
from rich.console import Console

from junit_notify.errors import DeliveryError
from junit_notify.schemas import WebhookMessage
from junit_notify.settings import DEFAULT_TIMEOUT_SECONDS

__all__ = ["send_message"]

LOGGER = logging.getLogger(__name__)
console = Console()


async def send_message(
    message: str,
    webhook_url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    client: httpx.AsyncClient | None = None,
) -> None:
    """POST ``{"text": message}`` to ``webhook_url``.

    Raises :class:`DeliveryError` on a non-2xx answer or any transport error.
    There is no retry; the caller treats a failure as the end of the run.
    """

    payload = WebhookMessage(text=message).model_dump()
    http_client = client or httpx.AsyncClient(timeout=timeout)
    try:
        LOGGER.debug("Posting %s chars to webhook", len(message))
        try:
            response = await http_client.post(webhook_url, json=payload)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            LOGGER.warning("Webhook delivery failed: %s", exc)
            raise DeliveryError(
                f"Failed to send message to Slack: {exc}",
                detail=str(exc) or exc.__class__.__name__,
            ) from exc

        LOGGER.info("Webhook responded with HTTP %s", response.status_code)
        if not response.is_success:
            detail = response.text
            raise DeliveryError(
                f"Slack API error: {detail}",
                detail=detail,
                status_code=response.status_code,
            )
    finally:
        if client is None:
            await http_client.aclose()

    console.print("[green]Results sent to Slack[/]")
