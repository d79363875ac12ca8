"""Payment, allocation, bank slip and FlashPay endpoints."""

from __future__ import annotations

import warnings
from typing import Any, Mapping, Sequence

from ..transport.http import HttpClient
from ..transport.query import encode_uri_component as _q
from ..types import AllocationInput, CreatePaymentRequest, FlashPayRequest, PaginatedResponse


class Payments:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    async def list(self, params: Mapping[str, Any] | None = None) -> PaginatedResponse:
        return await self._http.get("/payments", params)

    async def get(self, payment_id: str) -> dict[str, Any]:
        return await self._http.get(f"/payments/{_q(payment_id)}")

    async def create(self, data: CreatePaymentRequest) -> dict[str, Any]:
        return await self._http.post("/payments", data)

    async def update(self, payment_id: str, data: Mapping[str, Any]) -> dict[str, Any]:
        return await self._http.patch(f"/payments/{_q(payment_id)}", data)

    async def delete(self, payment_id: str) -> None:
        await self._http.delete(f"/payments/{_q(payment_id)}")

    async def get_allocations(self, payment_id: str) -> list[dict[str, Any]]:
        return await self._http.get(f"/payments/{_q(payment_id)}/allocations")

    async def replace_allocations(
        self, payment_id: str, allocations: Sequence[AllocationInput]
    ) -> Any:
        """Replace every invoice allocation of a payment in one call."""
        return await self._http.put(
            f"/payments/{_q(payment_id)}/allocations",
            {"allocations": [dict(item) for item in allocations]},
        )

    async def create_allocation(self, payment_id: str, invoice_id: str, amount: float) -> dict[str, Any]:
        warnings.warn(
            "create_allocation is deprecated, use replace_allocations",
            DeprecationWarning,
            stacklevel=2,
        )
        return await self._http.post(
            f"/payments/{_q(payment_id)}/allocations",
            {"invoice_id": invoice_id, "amount": amount},
        )

    # bank slips

    async def get_slip(self, payment_id: str) -> dict[str, Any] | None:
        return await self._http.get(f"/payments/{_q(payment_id)}/slip")

    async def upload_slip(self, payment_id: str, data: Mapping[str, Any]) -> dict[str, Any]:
        return await self._http.post(f"/payments/{_q(payment_id)}/slip", data)

    async def verify_slip(self, payment_id: str, data: Mapping[str, Any]) -> Any:
        return await self._http.post(f"/payments/{_q(payment_id)}/slip/verify", data)

    # flashpay

    async def initiate_flashpay(self, data: FlashPayRequest) -> dict[str, Any]:
        """Start a FlashPay payment.

        The answer carries ``qr_image``/``qr_raw_data`` for ``flashpay_type="qr"``
        and ``deeplink_url`` for ``flashpay_type="app"``.
        """
        return await self._http.post("/payments/flashpay", data)

    async def generate_flashpay_qr(self, data: FlashPayRequest) -> dict[str, Any]:
        warnings.warn(
            "generate_flashpay_qr is deprecated, use initiate_flashpay",
            DeprecationWarning,
            stacklevel=2,
        )
        return await self.initiate_flashpay(data)
