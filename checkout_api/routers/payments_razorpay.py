"""
Razorpay checkout endpoints: order creation and payment signature verification.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Request

from checkout_api.config import Settings
from checkout_api.deps import get_gateway, get_settings
from checkout_api.errors import InvalidAmountError, error_response
from checkout_api.logging_config import get_logger
from checkout_api.schemas import CreateOrderRequest, VerifyPaymentRequest
from checkout_api.services.payments import (
    DEFAULT_CURRENCY,
    PaymentGateway,
    default_receipt,
    to_minor_units,
    verify_payment_signature,
)

logger = get_logger(__name__)

router = APIRouter(tags=["Razorpay"])


def _config_error():
    return error_response(500, "Razorpay configuration error", "Missing credentials")


@router.post("/create-order")
async def create_order(
    request: Request,
    body: Optional[CreateOrderRequest] = None,
    settings: Settings = Depends(get_settings),
    gateway: Optional[PaymentGateway] = Depends(get_gateway),
):
    logger.info(
        "create_order_received",
        has_razorpay_key=bool(settings.RAZORPAY_KEY_ID),
        has_razorpay_secret=bool(settings.RAZORPAY_KEY_SECRET),
    )

    if not settings.razorpay_configured or gateway is None:
        logger.error("razorpay_credentials_missing")
        return _config_error()

    if body is None or not (body.model_fields_set or body.model_extra):
        return error_response(400, "Invalid request", "Request body is empty")

    try:
        amount = to_minor_units(body.amount)
    except InvalidAmountError as e:
        return error_response(400, "Invalid amount", str(e), receivedAmount=body.amount)

    currency = body.currency or DEFAULT_CURRENCY
    receipt = body.receipt or default_receipt()
    notes = body.notes or {}

    try:
        order = await gateway.create_order(amount=amount, currency=currency, receipt=receipt, notes=notes)
    except Exception as e:
        logger.error(
            "create_order_failed",
            error=str(e),
            exc_info=True,
            amount=amount,
            currency=currency,
            receipt=receipt,
        )
        return error_response(
            500,
            "Failed to create order",
            str(e),
            debug={
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "requestId": getattr(request.state, "request_id", None),
            },
        )

    logger.info("create_order_succeeded", order_id=order.get("id"), amount=amount, currency=currency)
    return {"success": True, "order": order, "key": settings.RAZORPAY_KEY_ID}


@router.post("/verify-payment")
async def verify_payment(
    body: Optional[VerifyPaymentRequest] = None,
    settings: Settings = Depends(get_settings),
):
    if not settings.RAZORPAY_KEY_SECRET:
        logger.error("razorpay_credentials_missing")
        return _config_error()

    body = body or VerifyPaymentRequest()
    try:
        is_authentic = verify_payment_signature(
            body.razorpay_order_id,
            body.razorpay_payment_id,
            body.razorpay_signature,
            settings.RAZORPAY_KEY_SECRET,
        )
    except Exception as e:
        logger.error("verify_payment_error", error=str(e), exc_info=True)
        return error_response(500, "Internal server error during verification", str(e))

    if not is_authentic:
        logger.warning("verify_payment_rejected", order_id=body.razorpay_order_id)
        return error_response(400, "Payment verification failed")

    logger.info("verify_payment_succeeded", order_id=body.razorpay_order_id, payment_id=body.razorpay_payment_id)
    return {
        "success": True,
        "message": "Payment verification successful",
        "orderId": body.razorpay_order_id,
        "paymentId": body.razorpay_payment_id,
    }
