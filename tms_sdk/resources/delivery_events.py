"""Delivery event and proof-of-delivery endpoints."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..transport.http import FileInput, HttpClient
from ..transport.query import encode_uri_component as _q


class DeliveryEvents:
    def __init__(self, http: HttpClient) -> None:
        self._http = http

    async def create(self, data: Mapping[str, Any]) -> dict[str, Any]:
        return await self._http.post("/delivery-events", data)

    async def upload_pods(self, event_id: str, photos: Sequence[FileInput]) -> Any:
        """Upload POD photos as multipart form data.

        Each photo is raw bytes (sent as ``photo-<index>``) or a
        ``(filename, bytes[, content_type])`` tuple.
        """
        return await self._http.upload(
            f"/delivery-events/{_q(event_id)}/pods",
            "photos[]",
            photos,
            error_message="Failed to upload PODs",
        )

    async def delete_pod(self, event_id: str, image_url: str) -> None:
        await self._http.delete(f"/delivery-events/{_q(event_id)}/pods/{_q(image_url)}")
