"""Billing record endpoints."""

from __future__ import annotations

from typing import Any, Mapping

from ..transport.http import HttpClient
from ..transport.query import encode_uri_component as _q
from ..types import CreateBillingRequest, ListBillingsParams, PaginatedResponse, UpdateBillingRequest


class Billings:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    async def list(self, params: ListBillingsParams | None = None) -> PaginatedResponse:
        return await self._http.get("/billings", params)

    async def get(self, billing_id: str) -> dict[str, Any]:
        return await self._http.get(f"/billings/{_q(billing_id)}")

    async def create(self, data: CreateBillingRequest) -> dict[str, Any]:
        return await self._http.post("/billings", data)

    async def update(self, billing_id: str, data: UpdateBillingRequest) -> dict[str, Any]:
        return await self._http.patch(f"/billings/{_q(billing_id)}", data)

    async def delete(self, billing_id: str) -> None:
        await self._http.delete(f"/billings/{_q(billing_id)}")

    async def send_email(self, data: Mapping[str, Any]) -> dict[str, Any]:
        """Email a billing summary selected by ``filter`` or explicit ``billing_ids``."""
        return await self._http.post("/billings/email", data)
