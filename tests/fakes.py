"""Test doubles injected through create_app."""
from typing import Any, Dict, List, Optional

from checkout_api.config import Settings
from checkout_api.errors import EmailDeliveryError, GatewayError
from checkout_api.services.email_service import OutgoingEmail

KEY_ID = "rzp_test_key"
KEY_SECRET = "s3cr3t"
MAILBOX = "orders@example.com"


def make_settings(**overrides) -> Settings:
    values = {
        "RAZORPAY_KEY_ID": KEY_ID,
        "RAZORPAY_KEY_SECRET": KEY_SECRET,
        "EMAIL_USER": MAILBOX,
        "SENDGRID_API_KEY": "SG.test",
        "ALLOWED_ORIGINS": "*",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class FakeGateway:
    def __init__(self, error: Optional[Exception] = None):
        self.calls: List[Dict[str, Any]] = []
        self.error = error

    async def create_order(self, amount, currency, receipt, notes):
        self.calls.append({"amount": amount, "currency": currency, "receipt": receipt, "notes": notes})
        if self.error:
            raise self.error
        return {
            "id": "order_TEST123",
            "entity": "order",
            "amount": amount,
            "currency": currency,
            "receipt": receipt,
            "status": "created",
        }


class FakeMailer:
    def __init__(self, message_id: str = "msg-1", error: Optional[Exception] = None):
        self.sent: List[OutgoingEmail] = []
        self.message_id = message_id
        self.error = error

    async def send(self, email: OutgoingEmail) -> Optional[str]:
        self.sent.append(email)
        if self.error:
            raise self.error
        return self.message_id


def rejecting_gateway() -> FakeGateway:
    return FakeGateway(error=GatewayError("The amount must be atleast INR 1.00", status_code=400))


def failing_mailer() -> FakeMailer:
    return FakeMailer(error=EmailDeliveryError("SendGrid responded with status 401"))
