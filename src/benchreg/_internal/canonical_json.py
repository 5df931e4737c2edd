"""Byte-stable JSON used for schema fingerprints and CLI reports."""

import hashlib
import json
from typing import Any


def canonical_dumps(obj: Any) -> str:
    """
    Serialize obj with sorted keys and compact separators.

    Two structurally equal objects always produce the same string, so the
    output can be hashed or diffed across platforms.
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False
    )


def sha256_fingerprint(obj: Any) -> str:
    """Return "sha256:<hex>" over the canonical JSON of obj."""
    digest = hashlib.sha256(canonical_dumps(obj).encode("utf-8")).hexdigest()
    return f"sha256:{digest}"
