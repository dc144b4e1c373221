# checkout_api/services/email_service.py

from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol, Tuple

from jinja2 import Environment, PackageLoader, select_autoescape
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Cc, Mail
from starlette.concurrency import run_in_threadpool

from checkout_api.errors import ConfigurationError, EmailDeliveryError
from checkout_api.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_AGENT_NAME = "Call Center Agent"
DEFAULT_CURRENCY_SYMBOL = "₹"

SHIPPING_FIELDS = ("lastName", "phone", "address", "city", "state", "pincode")

_templates = Environment(
    loader=PackageLoader("checkout_api", "templates"),
    autoescape=select_autoescape(["html"]),
)


@dataclass
class OutgoingEmail:
    to_email: str
    subject: str
    html: str


class Mailer(Protocol):
    async def send(self, email: OutgoingEmail) -> Optional[str]:
        """Send the email; return the provider's message id."""
        ...


class SendGridMailer:
    """SendGrid sender; the service mailbox is both sender and cc."""

    def __init__(self, api_key: Optional[str], mailbox: Optional[str], from_name: Optional[str] = None):
        if not api_key or not mailbox:
            raise ConfigurationError("Email service not configured")
        self._client = SendGridAPIClient(api_key)
        self.mailbox = mailbox
        self.from_name = from_name

    def _build(self, email: OutgoingEmail) -> Mail:
        sender = (self.mailbox, self.from_name) if self.from_name else self.mailbox
        message = Mail(
            from_email=sender,
            to_emails=email.to_email,
            subject=email.subject,
            html_content=email.html,
        )
        message.add_cc(Cc(self.mailbox))
        return message

    def _send_sync(self, email: OutgoingEmail) -> Optional[str]:
        try:
            res = self._client.send(self._build(email))
        except Exception as e:
            raise EmailDeliveryError(str(e) or e.__class__.__name__) from e
        if res.status_code >= 400:
            raise EmailDeliveryError(f"SendGrid responded with status {res.status_code}")
        headers = res.headers or {}
        return headers.get("X-Message-Id")

    async def send(self, email: OutgoingEmail) -> Optional[str]:
        # SendGrid's client is blocking
        return await run_in_threadpool(self._send_sync, email)


def resolve_agent_name(order_details: Optional[Dict[str, Any]], agent_name: Optional[str]) -> str:
    """orderDetails.agentName wins over the top-level agentName, both over the default."""
    return (order_details or {}).get("agentName") or agent_name or DEFAULT_AGENT_NAME


def build_order_confirmation(
    order_details: Optional[Dict[str, Any]],
    customer_details: Optional[Dict[str, Any]],
    product_name: Optional[str],
    agent_name: Optional[str] = None,
) -> Tuple[str, str]:
    """Returns subject + HTML for the order confirmation mail"""
    order = order_details or {}
    customer = customer_details or {}

    subject = f"Order Confirmation #{_text(order.get('orderNumber'))}"

    shipping = {field: customer.get(field) for field in SHIPPING_FIELDS if customer.get(field)}

    html = _templates.get_template("order_confirmation.html").render(
        first_name=_text(customer.get("firstName")),
        order_number=_text(order.get("orderNumber")),
        total_amount=_text(order.get("totalAmount")),
        advance_amount=_text(order.get("Advance_Amount")),
        currency_symbol=order.get("currency") or DEFAULT_CURRENCY_SYMBOL,
        payment_method=_text(order.get("paymentMethod")),
        agent_name=resolve_agent_name(order, agent_name),
        product_name=_text(product_name),
        shipping=shipping,
    )
    return subject, html


def _text(value: Any) -> str:
    return "" if value is None else str(value)
