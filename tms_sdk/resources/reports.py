"""Financial report endpoints (JSON and CSV)."""

from __future__ import annotations

from typing import Any, Mapping

from ..transport.http import HttpClient
from ..types import RevenueSummaryParams


class Reports:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    async def billing_by_service(self, params: Mapping[str, Any]) -> dict[str, Any]:
        return await self._http.get("/reports/billing-by-service", params)

    async def billing_by_service_csv(self, params: Mapping[str, Any]) -> bytes:
        return await self._fetch_csv("/reports/billing-by-service", params)

    async def outstanding_invoices(self, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return await self._http.get("/reports/outstanding-invoices", params)

    async def outstanding_invoices_csv(self, params: Mapping[str, Any] | None = None) -> bytes:
        return await self._fetch_csv("/reports/outstanding-invoices", params)

    async def payment_history(self, params: Mapping[str, Any]) -> dict[str, Any]:
        return await self._http.get("/reports/payment-history", params)

    async def payment_history_csv(self, params: Mapping[str, Any]) -> bytes:
        return await self._fetch_csv("/reports/payment-history", params)

    async def revenue_summary(self, params: RevenueSummaryParams) -> dict[str, Any]:
        return await self._http.get("/reports/revenue-summary", params)

    async def revenue_summary_csv(self, params: RevenueSummaryParams) -> bytes:
        return await self._fetch_csv("/reports/revenue-summary", params)

    async def _fetch_csv(self, path: str, params: Mapping[str, Any] | None) -> bytes:
        return await self._http.request_raw(
            "GET",
            path,
            query={**(params or {}), "format": "csv"},
            error_message="Failed to fetch report",
        )
