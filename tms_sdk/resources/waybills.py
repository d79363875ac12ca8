"""Waybill (shipping order) endpoints."""

from __future__ import annotations

from typing import Any, Sequence

from ..transport.http import HttpClient
from ..transport.query import encode_uri_component as _q
from ..types import (
    AddPackageRequest,
    ConsolidateWaybillsRequest,
    CreateWaybillRequest,
    CreateWaybillResponse,
    UpdateAdditionalServiceRequest,
    WaybillEvents,
)


class Waybills:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    async def create(self, data: CreateWaybillRequest) -> CreateWaybillResponse:
        return await self._http.post("/waybills", data)

    async def cancel(self, waybill_no: str) -> dict[str, Any]:
        return await self._http.delete(f"/waybills/{_q(waybill_no)}")

    async def get_events(self, waybill_no: str) -> WaybillEvents:
        """Tracking events; a signed GET."""
        return await self._http.get_with_signature(f"/waybills/{_q(waybill_no)}/events")

    async def get_routes(self, waybill_no: str) -> WaybillEvents:
        """Tracking routes with numeric state codes (legacy integrations)."""
        return await self._http.get_with_signature(f"/waybills/{_q(waybill_no)}/routes")

    async def get_label(self, waybill_no: str, package_id: str | None = None) -> bytes:
        """Shipping label PDF, optionally for a single package."""
        return await self._http.request_raw(
            "GET",
            f"/waybills/{_q(waybill_no)}/label",
            query={"packageId": package_id or None},
            error_message="Failed to get label",
        )

    async def get_batch_label(self, waybill_nos: Sequence[str]) -> bytes:
        """Merged label PDF for up to 100 waybills."""
        return await self._http.request_raw(
            "POST",
            "/waybills/batch-label",
            json={"waybill_nos": list(waybill_nos)},
            error_message="Failed to get batch labels",
        )

    async def add_package(self, waybill_no: str, data: AddPackageRequest) -> dict[str, Any]:
        return await self._http.post(f"/waybills/{_q(waybill_no)}/packages", data)

    async def list_additional_services(self, waybill_no: str) -> list[dict[str, Any]]:
        return await self._http.get(f"/waybills/{_q(waybill_no)}/additional-services")

    async def add_additional_services(
        self, waybill_no: str, service_ids: Sequence[str]
    ) -> list[dict[str, Any]]:
        return await self._http.post(
            f"/waybills/{_q(waybill_no)}/additional-services",
            {"service_ids": list(service_ids)},
        )

    async def update_additional_service(
        self,
        waybill_no: str,
        service_id: str,
        data: UpdateAdditionalServiceRequest,
    ) -> dict[str, Any]:
        return await self._http.patch(
            f"/waybills/{_q(waybill_no)}/additional-services/{_q(service_id)}",
            data,
        )

    async def consolidate(self, data: ConsolidateWaybillsRequest) -> dict[str, Any]:
        """Create a master waybill from several source waybills."""
        return await self._http.post("/waybills/consolidated-waybills", data)
