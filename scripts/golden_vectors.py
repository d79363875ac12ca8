"""Prints canonical strings and signatures for cross-implementation checks.

Usage: python scripts/golden_vectors.py vectors.json

Each vector is ``{"body": {...}, "mchId": ..., "nonceStr": ..., "timestamp": ...}``
with optional ``apiSecret`` and ``signType``.
"""

import sys
from pathlib import Path

import orjson

from tms_sdk.transport.canonical_json import canonical_dumps
from tms_sdk.transport.signatures import SIGN_TYPE_SHA256, sign_payload


def render(vector: dict) -> dict:
    signed = sign_payload(
        vector.get("body") or {},
        api_key=vector["mchId"],
        api_secret=vector.get("apiSecret", ""),
        sign_type=vector.get("signType", SIGN_TYPE_SHA256),
        nonce=vector["nonceStr"],
        timestamp=int(vector["timestamp"]),
    )
    unsigned = {key: value for key, value in signed.items() if key != "sign"}
    return {"canonical": canonical_dumps(unsigned), "sign": signed["sign"]}


def main() -> None:
    vectors = orjson.loads(Path(sys.argv[1]).read_bytes())
    for vector in vectors:
        sys.stdout.write(orjson.dumps(render(vector)).decode("utf-8") + "\n")


if __name__ == "__main__":
    main()
