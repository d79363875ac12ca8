"""Configuration helpers for the TMS client."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml

from ..transport.signatures import SIGN_TYPE_SHA256, SIGN_TYPES

DEFAULT_TIMEOUT_MS = 30000

_ENV_OVERRIDES = {
    "TMS_BASE_URL": "base_url",
    "TMS_API_KEY": "api_key",
    "TMS_API_SECRET": "api_secret",
    "TMS_TIMEOUT_MS": "timeout_ms",
    "TMS_SIGN_TYPE": "sign_type",
}


@dataclass(frozen=True)
class ClientConfig:
    base_url: str
    api_key: str
    api_secret: str = field(repr=False)
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    headers: Mapping[str, str] = field(default_factory=dict)
    sign_type: str = SIGN_TYPE_SHA256

    def __post_init__(self) -> None:
        if not self.base_url:
            raise ValueError("base_url is required")
        if not self.api_key:
            raise ValueError("api_key is required")
        if not self.api_secret:
            raise ValueError("api_secret is required")
        if self.timeout_ms <= 0:
            raise ValueError("timeout_ms must be positive")
        if self.sign_type not in SIGN_TYPES:
            raise ValueError(f"unknown sign_type {self.sign_type}")
        if self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url[:-1])
        headers = {str(key): str(value) for key, value in dict(self.headers or {}).items()}
        object.__setattr__(self, "headers", MappingProxyType(headers))

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(path)
    return yaml.safe_load(path.read_text()) or {}


def load_client_config(path: Path | str | None = None, **overrides: Any) -> ClientConfig:
    """Build a config from YAML, then environment variables, then ``overrides``."""
    data: dict[str, Any] = {}
    source = path or os.getenv("TMS_CONFIG_PATH")
    if source:
        data.update(_load_yaml(Path(source)).get("client", {}) or {})
    for env_name, key in _ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            data[key] = value
    data.update({key: value for key, value in overrides.items() if value is not None})
    return ClientConfig(
        base_url=str(data.get("base_url", "")),
        api_key=str(data.get("api_key", "")),
        api_secret=str(data.get("api_secret", "")),
        timeout_ms=int(data.get("timeout_ms", DEFAULT_TIMEOUT_MS)),
        headers=dict(data.get("headers") or {}),
        sign_type=str(data.get("sign_type", SIGN_TYPE_SHA256)),
    )


@lru_cache(maxsize=1)
def get_client_config() -> ClientConfig:
    return load_client_config()
