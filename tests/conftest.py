import pytest
from typing import Any, Dict, Generator, List
from fastapi.testclient import TestClient

from booking_backend.asgi import app as fastapi_app

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "/tests/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "/tests/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)

@pytest.fixture(scope="session")
def app():
    return fastapi_app

@pytest.fixture()
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c


class FakeStripe:
    """Enregistre les appels Stripe au lieu de les envoyer."""

    def __init__(self):
        self.coupons: List[Dict[str, Any]] = []
        self.sessions: List[Dict[str, Any]] = []
        self.line_item_requests: List[str] = []
        self.line_items: List[Dict[str, Any]] = [
            {"description": "Living Room", "amount_total": 50000},
        ]
        self.fail_session = False

    def create_coupon(self, *, amount_off, name, currency="gbp"):
        self.coupons.append({"amount_off": amount_off, "name": name, "currency": currency})
        return f"coupon_{len(self.coupons)}"

    def create_session(self, **kwargs):
        if self.fail_session:
            raise RuntimeError("Stripe session creation failed")
        self.sessions.append(kwargs)
        return {"id": "cs_test_123", "url": "https://checkout.stripe.test/pay/cs_test_123"}

    def list_line_items(self, session_id):
        self.line_item_requests.append(session_id)
        return list(self.line_items)


class FakeMailer:
    def __init__(self):
        self.sent: List[Dict[str, Any]] = []
        self.fail = False

    async def send_email(self, *, to, subject, html, from_address):
        if self.fail:
            raise RuntimeError("Resend unavailable")
        self.sent.append({"to": to, "subject": subject, "html": html, "from": from_address})
        return {"id": f"email_{len(self.sent)}"}


# Mocks Stripe + Resend: aucun appel réseau pendant les tests
@pytest.fixture(autouse=True)
def fake_stripe(monkeypatch) -> FakeStripe:
    fake = FakeStripe()
    monkeypatch.setattr("booking_backend.payments.stripe_client.create_coupon", fake.create_coupon)
    monkeypatch.setattr("booking_backend.payments.stripe_client.create_session", fake.create_session)
    monkeypatch.setattr("booking_backend.payments.stripe_client.list_line_items", fake.list_line_items)
    return fake

@pytest.fixture(autouse=True)
def fake_mailer(monkeypatch) -> FakeMailer:
    fake = FakeMailer()
    monkeypatch.setattr("booking_backend.notifications.mailer.send_email", fake.send_email)
    return fake

@pytest.fixture
def completed_session() -> Dict[str, Any]:
    return {
        "id": "cs_test_123",
        "object": "checkout.session",
        "customer_email": "a@x.com",
        "amount_total": 42500,
        "payment_intent": "pi_123",
        "created": 1760882700,
        "metadata": {
            "customer_name": "A",
            "customer_phone": "123",
            "voucher_code": "",
            "subtotal": "500",
            "multi_room_discount": "75",
            "voucher_discount": "0",
            "total_discount": "75",
            "final_total": "425",
        },
    }

@pytest.fixture
def completed_event(completed_session) -> Dict[str, Any]:
    return {
        "id": "evt_1",
        "type": "checkout.session.completed",
        "data": {"object": completed_session},
    }

@pytest.fixture
def checkout_payload() -> Dict[str, Any]:
    return {
        "cart": {"Living Room": {"quantity": 1, "totalPrice": 500.00}},
        "addons": {},
        "totals": {"subtotalBeforeDiscount": 500, "discount": 75, "voucherDiscount": 0, "finalTotal": 425},
        "customer": {"name": "A", "email": "a@x.com", "phone": "123"},
        "successUrl": "https://shop.test/success",
        "cancelUrl": "https://shop.test/cancel",
    }
