from .amounts import DEFAULT_CURRENCY, default_receipt, to_minor_units
from .base import PaymentGateway
from .razorpay_adapter import RazorpayAdapter
from .signature import expected_signature, verify_payment_signature

__all__ = [
    "DEFAULT_CURRENCY",
    "PaymentGateway",
    "RazorpayAdapter",
    "default_receipt",
    "expected_signature",
    "to_minor_units",
    "verify_payment_signature",
]
