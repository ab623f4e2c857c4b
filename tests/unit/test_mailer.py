import json

import httpx
import pytest

from booking_backend import config
from booking_backend.notifications.mailer import EmailDeliveryError
# Référence directe: le fixture autouse remplace mailer.send_email dans les autres tests
from booking_backend.notifications.mailer import send_email as real_send_email


def _patch_transport(monkeypatch, handler):
    real_client = httpx.AsyncClient
    transport = httpx.MockTransport(handler)
    monkeypatch.setattr(httpx, "AsyncClient", lambda **kw: real_client(transport=transport))


@pytest.mark.asyncio
async def test_send_email_posts_to_resend(monkeypatch):
    monkeypatch.setattr(config, "RESEND_API_KEY", "re_test")
    monkeypatch.setattr(config, "RESEND_API_URL", "https://api.resend.test")
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        captured["auth"] = request.headers.get("authorization")
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={"id": "email_1"})

    _patch_transport(monkeypatch, handler)
    data = await real_send_email(
        to="a@x.com",
        subject="Booking Confirmation",
        html="<p>hi</p>",
        from_address="Shop <hello@shop.test>",
    )

    assert data == {"id": "email_1"}
    assert captured["url"] == "https://api.resend.test/emails"
    assert captured["auth"] == "Bearer re_test"
    assert captured["body"] == {
        "from": "Shop <hello@shop.test>",
        "to": ["a@x.com"],
        "subject": "Booking Confirmation",
        "html": "<p>hi</p>",
    }


@pytest.mark.asyncio
async def test_send_email_keeps_recipient_list(monkeypatch):
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json={"id": "email_2"})

    _patch_transport(monkeypatch, handler)
    await real_send_email(to=["ops@shop.test", "hello@shop.test"], subject="s", html="h", from_address="f")
    assert captured["body"]["to"] == ["ops@shop.test", "hello@shop.test"]


@pytest.mark.asyncio
async def test_send_email_raises_on_error_status(monkeypatch):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(422, json={"message": "Invalid `to` field"})

    _patch_transport(monkeypatch, handler)
    with pytest.raises(EmailDeliveryError) as exc:
        await real_send_email(to="bad", subject="s", html="h", from_address="f")
    assert exc.value.status_code == 422
    assert "Invalid `to` field" in str(exc.value)
