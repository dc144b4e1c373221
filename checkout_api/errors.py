"""
Error types raised by the gateway and email collaborators.

Handlers catch these at the route boundary and turn them into the JSON
envelope ``{"success": false, "message": ..., "error": ...}``.
"""
from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse


class CheckoutError(Exception):
    """Base class for errors surfaced to API callers."""


class ConfigurationError(CheckoutError):
    """A credential the request needs is not configured."""


class InvalidAmountError(CheckoutError, ValueError):
    """Order amount is missing, non-numeric or not positive."""


class GatewayError(CheckoutError):
    """Razorpay rejected the request or could not be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class EmailDeliveryError(CheckoutError):
    """The email provider rejected or failed to send a message."""


def error_response(
    status_code: int,
    message: str,
    error: Optional[str] = None,
    **extra: Any,
) -> JSONResponse:
    content: Dict[str, Any] = {"success": False, "message": message}
    if error is not None:
        content["error"] = error
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content)
