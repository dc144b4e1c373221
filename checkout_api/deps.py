from typing import Optional

from fastapi import Request

from checkout_api.config import Settings
from checkout_api.services.email_service import Mailer, SendGridMailer
from checkout_api.services.payments import PaymentGateway, RazorpayAdapter


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_gateway(request: Request) -> Optional[PaymentGateway]:
    """
    Gateway client for this app; built from settings on first use.
    None when Razorpay credentials are missing and no client was injected.
    """
    state = request.app.state
    if state.gateway is None:
        settings: Settings = state.settings
        if not settings.razorpay_configured:
            return None
        state.gateway = RazorpayAdapter(
            settings.RAZORPAY_KEY_ID,
            settings.RAZORPAY_KEY_SECRET,
            base_url=settings.RAZORPAY_API_BASE,
            timeout=settings.RAZORPAY_TIMEOUT_SECONDS,
        )
    return state.gateway


def get_mailer(request: Request) -> Optional[Mailer]:
    state = request.app.state
    if state.mailer is None:
        settings: Settings = state.settings
        if not settings.email_configured:
            return None
        state.mailer = SendGridMailer(
            settings.SENDGRID_API_KEY,
            settings.EMAIL_USER,
            from_name=settings.EMAIL_FROM_NAME,
        )
    return state.mailer
