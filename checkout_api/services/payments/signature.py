"""
Razorpay checkout signature verification.

After checkout Razorpay hands the client ``razorpay_signature``, the hex
HMAC-SHA256 of ``order_id|payment_id`` keyed with the account's key secret.
"""
import hashlib
import hmac
from typing import Optional


def expected_signature(order_id: str, payment_id: str, secret: str) -> str:
    message = f"{order_id}|{payment_id}"
    return hmac.new(secret.encode(), message.encode(), hashlib.sha256).hexdigest()


def verify_payment_signature(
    order_id: Optional[str],
    payment_id: Optional[str],
    signature: Optional[str],
    secret: str,
) -> bool:
    if not signature:
        return False
    digest = expected_signature(order_id or "", payment_id or "", secret)
    return hmac.compare_digest(digest.encode(), signature.encode())
