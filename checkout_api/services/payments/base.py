from __future__ import annotations

from typing import Protocol, Dict, Any


class PaymentGateway(Protocol):
    async def create_order(
        self,
        amount: int,
        currency: str,
        receipt: str,
        notes: Dict[str, Any],
    ) -> Dict[str, Any]:
        """
        Create a PSP order. ``amount`` is in minor units (paise for INR).
        Returns the gateway's order object as-is; at least { id, amount, currency }.
        """
        ...
