"""Nonce generation for signed requests."""

from __future__ import annotations

import secrets
import string

NONCE_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
DEFAULT_NONCE_LENGTH = 32


def generate_nonce(length: int = DEFAULT_NONCE_LENGTH) -> str:
    """Return a random alphanumeric token drawn uniformly from 62 characters."""
    if length <= 0:
        raise ValueError("nonce length must be positive")
    return "".join(secrets.choice(NONCE_ALPHABET) for _ in range(length))
