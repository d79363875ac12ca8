"""Billing profile and billing cycle endpoints."""

from __future__ import annotations

from typing import Any, Mapping

from ..transport.http import HttpClient
from ..transport.query import encode_uri_component as _q
from ..types import (
    CreateBillingProfileRequest,
    PaginatedResponse,
    TriggerCycleRequest,
    UpdateBillingProfileRequest,
)


class BillingProfiles:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    async def list(self, params: Mapping[str, Any] | None = None) -> PaginatedResponse:
        return await self._http.get("/billing-profiles", params)

    async def get(self, profile_id: str) -> dict[str, Any]:
        return await self._http.get(f"/billing-profiles/{_q(profile_id)}")

    async def create(self, data: CreateBillingProfileRequest) -> dict[str, Any]:
        return await self._http.post("/billing-profiles", data)

    async def update(self, profile_id: str, data: UpdateBillingProfileRequest) -> dict[str, Any]:
        return await self._http.patch(f"/billing-profiles/{_q(profile_id)}", data)

    async def delete(self, profile_id: str) -> dict[str, Any]:
        return await self._http.delete(f"/billing-profiles/{_q(profile_id)}")

    async def list_cycles(
        self, profile_id: str, params: Mapping[str, Any] | None = None
    ) -> PaginatedResponse:
        return await self._http.get(f"/billing-profiles/{_q(profile_id)}/cycles", params)

    async def trigger_cycle(
        self, profile_id: str, data: TriggerCycleRequest | None = None
    ) -> dict[str, Any]:
        """Run a billing cycle now, optionally as of ``as_of_date``."""
        return await self._http.post(f"/billing-profiles/{_q(profile_id)}/cycles", data or {})
