"""Invoice endpoints."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..transport.http import HttpClient
from ..transport.query import encode_uri_component as _q
from ..types import (
    CreateInvoiceRequest,
    IssueInvoiceRequest,
    PaginatedResponse,
    SendInvoiceEmailRequest,
)


class Invoices:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    async def list(self, params: Mapping[str, Any] | None = None) -> PaginatedResponse:
        return await self._http.get("/invoices", params)

    async def get(self, invoice_id: str) -> dict[str, Any]:
        return await self._http.get(f"/invoices/{_q(invoice_id)}")

    async def create(self, data: CreateInvoiceRequest) -> dict[str, Any]:
        return await self._http.post("/invoices", data)

    async def update(self, invoice_id: str, data: Mapping[str, Any]) -> dict[str, Any]:
        return await self._http.patch(f"/invoices/{_q(invoice_id)}", data)

    async def delete(self, invoice_id: str) -> None:
        await self._http.delete(f"/invoices/{_q(invoice_id)}")

    async def issue(self, invoice_id: str, data: IssueInvoiceRequest | None = None) -> Any:
        """Move a draft invoice to issued."""
        return await self._http.post(f"/invoices/{_q(invoice_id)}/issue", data or {})

    async def send_email(self, invoice_id: str, data: SendInvoiceEmailRequest) -> Any:
        return await self._http.post(f"/invoices/{_q(invoice_id)}/email", data)

    async def add_line_items(self, invoice_id: str, billing_ids: Sequence[str]) -> Any:
        return await self._http.post(
            f"/invoices/{_q(invoice_id)}/line-items",
            {"billing_ids": list(billing_ids)},
        )

    async def remove_line_items(self, invoice_id: str, billing_ids: Sequence[str]) -> Any:
        return await self._http.delete(
            f"/invoices/{_q(invoice_id)}/line-items",
            {"billing_ids": list(billing_ids)},
        )
