"""Response envelope classification.

The backend answers in two shapes that coexist across endpoints: a
data-wrapped shape (``{"data": ...}``) and a flat legacy shape that signals
failure in a 2xx response with ``{"code": <non-zero>, "success": false}``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from ..errors import DEFAULT_ERROR_MESSAGE, TMSApiError


@dataclass(frozen=True)
class Success:
    payload: Any


@dataclass(frozen=True)
class LegacyFailure:
    code: Any
    message: str
    details: Any


@dataclass(frozen=True)
class HttpFailure:
    status_code: int
    code: Any
    message: str
    details: Any


Envelope = Union[Success, LegacyFailure, HttpFailure]


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code <= 299


def classify_response(status_code: int, body: Any) -> Envelope:
    """Classify a decoded response body; the first matching rule wins."""
    fields = body if isinstance(body, dict) else {}
    if not is_success_status(status_code):
        code = _first_present(fields, "code")
        message = _first_present(fields, "error", "message")
        return HttpFailure(
            status_code=status_code,
            code=status_code if code is None else code,
            message=DEFAULT_ERROR_MESSAGE if message is None else message,
            details=body,
        )
    if "code" in fields and _is_failure_code(fields["code"]) and fields.get("success") is False:
        message = _first_present(fields, "message")
        return LegacyFailure(
            code=fields["code"],
            message=DEFAULT_ERROR_MESSAGE if message is None else message,
            details=fields.get("extra"),
        )
    if "data" in fields:
        return Success(fields["data"])
    return Success(body)


def parse_envelope(status_code: int, body: Any) -> Any:
    """Return the caller-relevant payload or raise :class:`TMSApiError`."""
    envelope = classify_response(status_code, body)
    if isinstance(envelope, Success):
        return envelope.payload
    if isinstance(envelope, LegacyFailure):
        raise TMSApiError(
            envelope.code,
            envelope.message,
            details=envelope.details,
            status_code=status_code,
            is_legacy=True,
        )
    raise TMSApiError(
        envelope.code,
        envelope.message,
        details=envelope.details,
        status_code=envelope.status_code,
    )


def _first_present(fields: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        value = fields.get(key)
        if value is not None:
            return value
    return None


def _is_failure_code(code: Any) -> bool:
    # strict comparison against the integer zero: False and "0" are failures
    if isinstance(code, bool):
        return True
    if isinstance(code, (int, float)):
        return code != 0
    return True
