"""Rate card endpoints."""

from __future__ import annotations

from typing import Any, Mapping

from ..transport.http import HttpClient
from ..transport.query import encode_uri_component as _q


class RateCards:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    async def list(self, params: Mapping[str, Any] | None = None) -> list[dict[str, Any]]:
        return await self._http.get("/rate-cards", params)

    async def get(self, rate_card_id: str) -> dict[str, Any]:
        return await self._http.get(f"/rate-cards/{_q(rate_card_id)}")

    async def create(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return await self._http.post("/rate-cards", data)

    async def update(self, rate_card_id: str, data: Mapping[str, Any]) -> dict[str, Any]:
        return await self._http.patch(f"/rate-cards/{_q(rate_card_id)}", data)

    async def delete(self, rate_card_id: str) -> None:
        await self._http.delete(f"/rate-cards/{_q(rate_card_id)}")
