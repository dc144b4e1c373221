"""
Request bodies accepted by the storefront endpoints.

Field names follow the storefront client and Razorpay checkout, hence the
mixed camelCase and snake_case. Everything is optional at the schema level;
the handlers decide which omissions are errors so they can answer in the
``{success, message, error}`` envelope.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict


class CreateOrderRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    amount: Any = None  # major units; number or numeric string
    currency: Optional[str] = None
    receipt: Optional[str] = None
    notes: Optional[Dict[str, Any]] = None


class VerifyPaymentRequest(BaseModel):
    razorpay_order_id: Optional[str] = None
    razorpay_payment_id: Optional[str] = None
    razorpay_signature: Optional[str] = None


class OrderConfirmationRequest(BaseModel):
    customerEmail: Optional[str] = None
    orderDetails: Optional[Dict[str, Any]] = None
    customerDetails: Optional[Dict[str, Any]] = None
    productName: Optional[str] = None
    agentName: Optional[str] = None
