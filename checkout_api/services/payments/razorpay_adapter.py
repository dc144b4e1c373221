from __future__ import annotations

import base64
from typing import Dict, Any, Optional

import httpx

from checkout_api.errors import ConfigurationError, GatewayError
from checkout_api.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_API_BASE = "https://api.razorpay.com"


class RazorpayAdapter:
    def __init__(
        self,
        key_id: Optional[str],
        key_secret: Optional[str],
        base_url: str = DEFAULT_API_BASE,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not key_id or not key_secret:
            raise ConfigurationError("Razorpay not configured")
        self.key_id = key_id
        token = base64.b64encode(f"{key_id}:{key_secret}".encode()).decode()
        self._auth_header = {"Authorization": f"Basic {token}"}
        self._base = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def _post(self, path: str, json: Dict[str, Any]) -> Dict[str, Any]:
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            try:
                r = await client.post(f"{self._base}{path}", json=json, headers=self._auth_header)
            except httpx.HTTPError as e:
                raise GatewayError(str(e) or e.__class__.__name__) from e
            if r.is_error:
                raise GatewayError(_error_description(r), status_code=r.status_code)
            return r.json()

    async def create_order(
        self,
        amount: int,
        currency: str,
        receipt: str,
        notes: Dict[str, Any],
    ) -> Dict[str, Any]:
        payload = {"amount": int(amount), "currency": currency, "receipt": receipt, "notes": notes}
        logger.info("razorpay_order_request", amount=payload["amount"], currency=currency, receipt=receipt)
        return await self._post("/v1/orders", payload)


def _error_description(response: httpx.Response) -> str:
    # Razorpay errors look like {"error": {"code": ..., "description": ...}}
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("description"):
            return str(error["description"])
    return f"Razorpay responded with status {response.status_code}"
