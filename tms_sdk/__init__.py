"""Async client SDK for the TMS transport-management API."""

from __future__ import annotations

from .client import TMSClient
from .config import ClientConfig, load_client_config
from .errors import TMSApiError, TMSError, TMSTimeoutError, TMSTransportError
from .transport.canonical_json import UNSET, canonical_dumps
from .transport.nonces import generate_nonce
from .transport.signatures import generate_signature, sign_payload, verify_signature
from .transport.timestamps import get_timestamp

__version__ = "1.0.0"

__all__ = [
    "UNSET",
    "ClientConfig",
    "TMSApiError",
    "TMSClient",
    "TMSError",
    "TMSTimeoutError",
    "TMSTransportError",
    "canonical_dumps",
    "generate_nonce",
    "generate_signature",
    "get_timestamp",
    "load_client_config",
    "sign_payload",
    "verify_signature",
]
