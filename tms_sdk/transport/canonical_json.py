"""Canonical JSON serialization used as the signature digest input.

The output has to match the server-side canonicalizer byte for byte:

* object keys are sorted by UTF-16 code unit at every depth,
* members whose value is :data:`UNSET` are dropped,
* ``NaN`` and the infinities collapse to ``null``,
* numbers use the shortest round-trip form with ECMAScript formatting rules,
* no whitespace is inserted anywhere.

The canonical form is only ever hashed, never parsed back.
"""

from __future__ import annotations

import hashlib
import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Union

import orjson

_BODY_OPTIONS = orjson.OPT_NON_STR_KEYS

# integer range orjson can serialize
_INT_MIN = -(2**63)
_INT_MAX = 2**64 - 1


class _Unset:
    """Marker for a field that was never set (dropped from objects)."""

    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Unset":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "_Unset":
        return self


UNSET: Any = _Unset()

JsonType = Union[str, int, float, bool, None, list["JsonType"], dict[str, "JsonType"]]


def canonical_dumps(value: Any) -> str:
    """Return the canonical string form of ``value``."""
    if value is None:
        return "null"
    if value is UNSET:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, Decimal)):
        return format_number(value)
    if isinstance(value, str):
        return _quote(value)
    if isinstance(value, Mapping):
        members = []
        for key in sorted(value, key=_sort_key):
            member = value[key]
            if member is UNSET:
                continue
            members.append(f"{_quote(_key_str(key))}:{canonical_dumps(member)}")
        return "{" + ",".join(members) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(canonical_dumps(item) for item in value) + "]"
    raise TypeError(f"value of type {type(value).__name__} is not JSON serializable")


def canonical_hash(payload: Any) -> str:
    """Return a SHA-256 hex digest for the canonical JSON representation."""
    return hashlib.sha256(canonical_dumps(payload).encode("utf-8")).hexdigest()


def format_number(value: int | float | Decimal) -> str:
    """Render a number the way ``Number.prototype.toString`` does.

    A :class:`~decimal.Decimal` is rendered from its nearest double, the
    value :func:`dumps_body` puts on the wire.
    """
    if isinstance(value, int):
        return str(value)
    value = float(value)
    if math.isnan(value) or math.isinf(value):
        return "null"
    if value == 0:
        return "0"
    sign, digits, exponent = Decimal(repr(value)).as_tuple()
    while len(digits) > 1 and digits[-1] == 0:
        digits = digits[:-1]
        exponent += 1
    text = "".join(str(d) for d in digits)
    k = len(text)
    n = exponent + k
    if k <= n <= 21:
        rendered = text + "0" * (n - k)
    elif 0 < n <= 21:
        rendered = f"{text[:n]}.{text[n:]}"
    elif -6 < n <= 0:
        rendered = "0." + "0" * (-n) + text
    else:
        mantissa = text[0] + (f".{text[1:]}" if k > 1 else "")
        power = n - 1
        rendered = f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"
    return f"-{rendered}" if sign else rendered


def strip_unset(value: Any) -> Any:
    """Drop :data:`UNSET` members so a payload can go on the wire.

    Array slots holding :data:`UNSET` become ``None``. Integers outside the
    64-bit range raise :class:`ValueError`.
    """
    if isinstance(value, Mapping):
        return {key: strip_unset(item) for key, item in value.items() if item is not UNSET}
    if isinstance(value, (list, tuple)):
        return [None if item is UNSET else strip_unset(item) for item in value]
    if isinstance(value, int) and not isinstance(value, bool) and not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer {value} is outside the 64-bit range and cannot be sent")
    return value


def dumps_body(payload: Any) -> bytes:
    """Serialize a request body for transmission."""
    return orjson.dumps(strip_unset(payload), default=_body_default, option=_BODY_OPTIONS)


def _body_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        if value.is_nan() or value.is_infinite():
            return None
        return float(value)
    raise TypeError(f"value of type {type(value).__name__} is not JSON serializable")


def _quote(text: str) -> str:
    return orjson.dumps(text).decode("utf-8")


def _key_str(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if isinstance(key, (int, float, Decimal)):
        return format_number(key)
    return str(key)


def _sort_key(key: Any) -> bytes:
    # UTF-16 code unit order, the ordering of Array.prototype.sort on strings
    return _key_str(key).encode("utf-16-be", "surrogatepass")
