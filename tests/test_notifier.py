from __future__ import annotations

import json

import httpx
import pytest

from junit_notify import notifier
from junit_notify.errors import DeliveryError


def _mock_client(handler) -> httpx.AsyncClient:  # noqa: ANN001
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_send_message_success(capsys) -> None:  # noqa: ANN001
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, headers={"content-type": "application/json"})

    client = _mock_client(handler)
    await notifier.send_message("test message", "https://hooks.example/T0", client=client)

    assert len(seen) == 1
    assert seen[0].method == "POST"
    assert str(seen[0].url) == "https://hooks.example/T0"
    assert json.loads(seen[0].content) == {"text": "test message"}
    assert not client.is_closed
    await client.aclose()
    assert "Results sent to Slack" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_send_message_server_error_carries_body() -> None:
    body = '{"error":"internal server error"}'

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text=body, headers={"content-type": "application/json"})

    async with _mock_client(handler) as client:
        with pytest.raises(DeliveryError) as excinfo:
            await notifier.send_message("test message", "https://hooks.example/T0", client=client)

    assert excinfo.value.status_code == 500
    assert excinfo.value.detail == body
    assert "internal server error" in str(excinfo.value)


@pytest.mark.asyncio
async def test_send_message_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with _mock_client(handler) as client:
        with pytest.raises(DeliveryError, match="Failed to send message to Slack") as excinfo:
            await notifier.send_message("test message", "https://hooks.example/T0", client=client)

    assert excinfo.value.status_code is None
    assert "connection refused" in excinfo.value.detail


@pytest.mark.asyncio
async def test_send_message_owns_client_when_not_injected(monkeypatch) -> None:  # noqa: ANN001
    created: list[httpx.AsyncClient] = []
    real_client = httpx.AsyncClient

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(204)

    def factory(*, timeout: float) -> httpx.AsyncClient:
        client = real_client(timeout=timeout, transport=httpx.MockTransport(handler))
        created.append(client)
        return client

    monkeypatch.setattr(notifier.httpx, "AsyncClient", factory)

    await notifier.send_message("hi", "https://hooks.example/T0", timeout=3.0)

    assert len(created) == 1
    assert created[0].is_closed
    assert created[0].timeout.read == 3.0


@pytest.mark.asyncio
async def test_send_message_invalid_url() -> None:
    def handler(request: httpx.Request) -> httpx.Response:  # pragma: no cover - never reached
        return httpx.Response(200)

    async with _mock_client(handler) as client:
        with pytest.raises(DeliveryError, match="Failed to send message to Slack") as excinfo:
            await notifier.send_message("m", "http://hooks.example:notaport/T0", client=client)

    assert excinfo.value.status_code is None
    assert "notaport" in excinfo.value.detail
