"""Sender account and sender address endpoints."""

from __future__ import annotations

from typing import Any, Mapping

from ..transport.http import HttpClient
from ..transport.query import encode_uri_component as _q


class SenderAccounts:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    async def list(self, params: Mapping[str, Any] | None = None) -> Any:
        return await self._http.get("/sender-accounts", params)

    async def get(self, account_id: str) -> dict[str, Any]:
        return await self._http.get(f"/sender-accounts/{_q(account_id)}")

    async def create(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return await self._http.post("/sender-accounts", data)

    async def update(self, account_id: str, data: Mapping[str, Any]) -> dict[str, Any]:
        return await self._http.put(f"/sender-accounts/{_q(account_id)}", data)

    async def delete(self, account_id: str) -> None:
        await self._http.delete(f"/sender-accounts/{_q(account_id)}")

    async def list_addresses(
        self, account_id: str, params: Mapping[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        return await self._http.get(f"/sender-accounts/{_q(account_id)}/addresses", params)

    async def get_address(self, account_id: str, address_id: str) -> dict[str, Any]:
        return await self._http.get(
            f"/sender-accounts/{_q(account_id)}/addresses/{_q(address_id)}"
        )

    async def create_address(self, account_id: str, data: Mapping[str, Any]) -> dict[str, Any]:
        return await self._http.post(f"/sender-accounts/{_q(account_id)}/addresses", data)

    async def update_address(
        self, account_id: str, address_id: str, data: Mapping[str, Any]
    ) -> dict[str, Any]:
        return await self._http.put(
            f"/sender-accounts/{_q(account_id)}/addresses/{_q(address_id)}",
            data,
        )

    async def delete_address(self, account_id: str, address_id: str) -> None:
        await self._http.delete(
            f"/sender-accounts/{_q(account_id)}/addresses/{_q(address_id)}"
        )
