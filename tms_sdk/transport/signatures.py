"""Request signing over the canonical JSON form of a payload."""

from __future__ import annotations

import hashlib
import hmac
from collections.abc import Mapping
from typing import Any

from .canonical_json import canonical_dumps
from .nonces import generate_nonce
from .timestamps import assert_within_skew, get_timestamp

SIGN_TYPE_SHA256 = "SHA256"
SIGN_TYPE_HMAC_SHA256 = "HMAC-SHA256"
SIGN_TYPES = frozenset({SIGN_TYPE_SHA256, SIGN_TYPE_HMAC_SHA256})

SIGN_FIELD = "sign"
RESERVED_FIELDS = ("mchId", "nonceStr", "timestamp", SIGN_FIELD)


class SignatureError(ValueError):
    """Raised when a payload signature is missing, invalid or cannot be computed."""


def generate_signature(
    params: Mapping[str, Any],
    api_secret: str | None = None,
    sign_type: str = SIGN_TYPE_SHA256,
) -> str:
    """Digest the canonical form of ``params`` without its ``sign`` member.

    Returns 64 uppercase hex characters. With ``SHA256`` the secret does not
    enter the digest; ``HMAC-SHA256`` keys the digest with it.
    """
    unsigned = {key: value for key, value in params.items() if key != SIGN_FIELD}
    message = canonical_dumps(unsigned).encode("utf-8")
    if sign_type == SIGN_TYPE_SHA256:
        digest = hashlib.sha256(message).hexdigest()
    elif sign_type == SIGN_TYPE_HMAC_SHA256:
        if not api_secret:
            raise SignatureError("api secret missing")
        digest = hmac.new(api_secret.encode("utf-8"), message, hashlib.sha256).hexdigest()
    else:
        raise SignatureError(f"unknown sign type {sign_type}")
    return digest.upper()


def sign_payload(
    body: Mapping[str, Any] | None,
    *,
    api_key: str,
    api_secret: str,
    sign_type: str = SIGN_TYPE_SHA256,
    nonce: str | None = None,
    timestamp: int | None = None,
) -> dict[str, Any]:
    """Return a signed copy of ``body``; the caller's mapping is left untouched."""
    signed = dict(body or {})
    signed["mchId"] = api_key
    signed["nonceStr"] = nonce if nonce is not None else generate_nonce()
    signed["timestamp"] = timestamp if timestamp is not None else get_timestamp()
    signed.pop(SIGN_FIELD, None)
    signed[SIGN_FIELD] = generate_signature(signed, api_secret, sign_type)
    return signed


def verify_signature(
    payload: Mapping[str, Any],
    api_secret: str | None = None,
    sign_type: str = SIGN_TYPE_SHA256,
    *,
    max_skew_seconds: int | None = None,
) -> None:
    """Validate the ``sign`` member of a signed payload."""
    signature = payload.get(SIGN_FIELD)
    if not signature or not isinstance(signature, str):
        raise SignatureError("signature missing")
    if max_skew_seconds is not None:
        assert_within_skew(payload.get("timestamp"), max_skew_seconds=max_skew_seconds)
    expected = generate_signature(payload, api_secret, sign_type)
    if not hmac.compare_digest(expected, signature):
        raise SignatureError("signature verification failed")
