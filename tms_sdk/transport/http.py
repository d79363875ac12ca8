"""HTTP transport: signing, timeouts and envelope parsing for every API call."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from typing import Any, Literal

import httpx
import orjson

from ..config import ClientConfig
from ..errors import DEFAULT_ERROR_MESSAGE, TMSApiError, TMSTransportError, TMSTimeoutError
from .canonical_json import dumps_body
from .envelope import is_success_status, parse_envelope
from .query import build_query_string, is_omitted
from .signatures import sign_payload

logger = logging.getLogger(__name__)

Method = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]

# DELETE bodies are sent and signed too (invoices.remove_line_items)
_BODY_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})

FileInput = bytes | tuple[str, bytes] | tuple[str, bytes, str]


class HttpClient:
    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._client = httpx.AsyncClient(transport=transport)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    async def close(self) -> None:
        await self._client.aclose()

    def sign_request(self, body: Mapping[str, Any] | None) -> dict[str, Any]:
        return sign_payload(
            body,
            api_key=self._config.api_key,
            api_secret=self._config.api_secret,
            sign_type=self._config.sign_type,
        )

    def build_url(self, path: str, query: Mapping[str, Any] | None = None) -> str:
        return f"{self._config.base_url}{path}{build_query_string(query)}"

    def _headers(self, *, json_body: bool = True) -> dict[str, str]:
        headers = {"Content-Type": "application/json"} if json_body else {}
        headers.update(self._config.headers)
        return headers

    async def request(
        self,
        method: Method,
        path: str,
        *,
        body: Mapping[str, Any] | None = None,
        query: Mapping[str, Any] | None = None,
        sign: bool = True,
    ) -> Any:
        """Issue one API call and return the unwrapped payload.

        Signed ``GET`` calls sign the query parameters; signed ``POST``
        calls without a body still send the signature fields.
        """
        content: bytes | None = None
        if method == "GET" and sign:
            query = self.sign_request(
                {key: value for key, value in (query or {}).items() if not is_omitted(value)}
            )
        elif body is not None and method in _BODY_METHODS:
            content = dumps_body(self.sign_request(body) if sign else body)
        elif method == "POST" and sign:
            content = dumps_body(self.sign_request({}))
        logger.debug("tms request method=%s path=%s signed=%s", method, path, sign)
        response = await self._send(
            method,
            self.build_url(path, query),
            headers=self._headers(),
            content=content,
        )
        data = self._decode(response)
        try:
            return parse_envelope(response.status_code, data)
        except TMSApiError as exc:
            logger.warning(
                "tms api error method=%s path=%s status=%s code=%s",
                method,
                path,
                exc.status_code,
                exc.code,
            )
            raise

    async def get(self, path: str, query: Mapping[str, Any] | None = None) -> Any:
        return await self.request("GET", path, query=query, sign=False)

    async def get_with_signature(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        return await self.request("GET", path, query=params or {}, sign=True)

    async def post(self, path: str, body: Mapping[str, Any] | None = None) -> Any:
        return await self.request("POST", path, body=body)

    async def put(self, path: str, body: Mapping[str, Any] | None = None) -> Any:
        return await self.request("PUT", path, body=body)

    async def patch(self, path: str, body: Mapping[str, Any] | None = None) -> Any:
        return await self.request("PATCH", path, body=body)

    async def delete(self, path: str, body: Mapping[str, Any] | None = None) -> Any:
        return await self.request("DELETE", path, body=body)

    async def request_raw(
        self,
        method: Method,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        json: Mapping[str, Any] | None = None,
        error_message: str = DEFAULT_ERROR_MESSAGE,
    ) -> bytes:
        """Fetch a binary payload (labels, CSV reports); no envelope parsing."""
        content = dumps_body(json) if json is not None else None
        logger.debug("tms raw request method=%s path=%s", method, path)
        response = await self._send(
            method,
            self.build_url(path, query),
            headers=self._headers(json_body=content is not None),
            content=content,
        )
        if not is_success_status(response.status_code):
            self._raise_raw_failure(response, error_message)
        return response.content

    async def upload(
        self,
        path: str,
        field_name: str,
        files: Sequence[FileInput],
        *,
        error_message: str = DEFAULT_ERROR_MESSAGE,
    ) -> Any:
        """POST files as multipart form data and return the decoded JSON answer."""
        parts = []
        for index, item in enumerate(files):
            if isinstance(item, (bytes, bytearray)):
                item = (f"photo-{index}", bytes(item))
            parts.append((field_name, item))
        logger.debug("tms upload path=%s files=%d", path, len(parts))
        response = await self._send(
            "POST",
            self.build_url(path),
            headers=self._headers(json_body=False),
            files=parts,
        )
        if not is_success_status(response.status_code):
            self._raise_raw_failure(response, error_message)
        return self._decode(response)

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        timeout = self._config.timeout_seconds
        try:
            return await asyncio.wait_for(
                self._client.request(method, url, timeout=timeout, **kwargs),
                timeout=timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
            logger.warning("tms request timed out method=%s url=%s", method, _redact(url))
            raise TMSTimeoutError(
                f"request timed out after {self._config.timeout_ms}ms"
            ) from exc
        except httpx.HTTPError as exc:
            logger.warning("tms request failed method=%s url=%s error=%s", method, _redact(url), exc)
            raise TMSTransportError(f"request failed: {exc}") from exc

    def _decode(self, response: httpx.Response) -> Any:
        try:
            return orjson.loads(response.content)
        except orjson.JSONDecodeError as exc:
            raise TMSTransportError(
                "response body is not valid JSON",
                status_code=response.status_code,
            ) from exc

    def _raise_raw_failure(self, response: httpx.Response, error_message: str) -> None:
        data = self._decode(response)
        message = data.get("error") if isinstance(data, dict) else None
        raise TMSApiError(
            response.status_code,
            message if message is not None else error_message,
            details=data,
            status_code=response.status_code,
        )


def _redact(url: str) -> str:
    # signed GET queries carry the signature
    return url.split("?", 1)[0]
