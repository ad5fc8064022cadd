"""Pydantic payloads sent over the wire."""

from __future__ import annotations

from pydantic import BaseModel, Field


class WebhookMessage(BaseModel):
    """Body of the incoming-webhook POST."""

    text: str = Field(description="Message rendered by the chat client (mrkdwn)")
