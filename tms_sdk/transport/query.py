"""Query-string construction."""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any
from urllib.parse import quote

from .canonical_json import UNSET, canonical_dumps, format_number

# characters encodeURIComponent leaves alone besides alphanumerics and "-_.~"
_URI_COMPONENT_SAFE = "!*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def is_omitted(value: Any) -> bool:
    return value is None or value is UNSET


def stringify_param(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, (int, float, Decimal)):
        return format_number(value)
    if isinstance(value, (list, tuple)):
        return ",".join("" if is_omitted(item) else stringify_param(item) for item in value)
    if isinstance(value, Mapping):
        return canonical_dumps(value)
    return str(value)


def build_query_string(params: Mapping[str, Any] | None) -> str:
    """Return ``?k=v&...`` for the defined parameters, or ``""`` when none are."""
    if not params:
        return ""
    parts = [
        f"{encode_uri_component(str(key))}={encode_uri_component(stringify_param(value))}"
        for key, value in params.items()
        if not is_omitted(value)
    ]
    return f"?{'&'.join(parts)}" if parts else ""
