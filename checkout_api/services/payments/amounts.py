"""Conversion of storefront amounts into the integer minor units Razorpay expects."""
import time
from decimal import Decimal, DecimalException, ROUND_HALF_UP
from typing import Any

from checkout_api.errors import InvalidAmountError

DEFAULT_CURRENCY = "INR"


def to_minor_units(amount: Any) -> int:
    """
    Convert an amount in major units (rupees) to minor units (paise).

    Accepts ints, floats and numeric strings. Rounds half up, so 499.99
    becomes 49999 and 10.005 becomes 1001.
    """
    if amount is None or isinstance(amount, bool):
        raise InvalidAmountError("Amount must be a positive number")
    if isinstance(amount, str):
        amount = amount.strip()
    if isinstance(amount, (int, float, str)):
        try:
            value = Decimal(str(amount))
        except DecimalException:
            raise InvalidAmountError("Amount must be a positive number")
    else:
        raise InvalidAmountError("Amount must be a positive number")

    if not value.is_finite() or value <= 0:
        raise InvalidAmountError("Amount must be a positive number")

    try:
        return int((value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    except DecimalException:
        # overflows or exceeds the decimal context precision
        raise InvalidAmountError("Amount must be a positive number")


def default_receipt() -> str:
    return f"receipt_{int(time.time() * 1000)}"
