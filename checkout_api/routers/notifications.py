from typing import Optional

from fastapi import APIRouter, Depends

from checkout_api.deps import get_mailer
from checkout_api.errors import error_response
from checkout_api.logging_config import get_logger
from checkout_api.schemas import OrderConfirmationRequest
from checkout_api.services.email_service import (
    Mailer,
    OutgoingEmail,
    build_order_confirmation,
    resolve_agent_name,
)

logger = get_logger(__name__)

router = APIRouter(tags=["Notifications"])


@router.post("/agent_to_customer")
async def agent_to_customer(
    body: Optional[OrderConfirmationRequest] = None,
    mailer: Optional[Mailer] = Depends(get_mailer),
):
    """
    Email an order confirmation to the customer, cc the service mailbox.
    """
    body = body or OrderConfirmationRequest()

    logger.info(
        "order_confirmation_received",
        customer_email=body.customerEmail,
        agent_name=resolve_agent_name(body.orderDetails, body.agentName),
        product_name=body.productName,
    )

    if not body.customerEmail:
        return error_response(400, "Customer email is required")

    subject, html = build_order_confirmation(
        body.orderDetails,
        body.customerDetails,
        body.productName,
        agent_name=body.agentName,
    )

    if mailer is None:
        logger.error("email_service_not_configured")
        return error_response(500, "Failed to send confirmation email", "Email service not configured")

    try:
        logger.info("order_confirmation_sending", customer_email=body.customerEmail)
        message_id = await mailer.send(OutgoingEmail(to_email=body.customerEmail, subject=subject, html=html))
    except Exception as e:
        logger.error("order_confirmation_failed", error=str(e), exc_info=True)
        return error_response(500, "Failed to send confirmation email", str(e))

    logger.info("order_confirmation_sent", message_id=message_id)
    return {
        "success": True,
        "message": "Confirmation email sent successfully!",
        "messageId": message_id,
    }
