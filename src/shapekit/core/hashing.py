"""
Canonical JSON serialization and descriptor fingerprints.

Provides a single canonical JSON policy and a SHA-256 fingerprint over a descriptor's
``describe`` output, so equal schemas get equal fingerprints regardless of which
instances they were built from (e.g. to key renderer caches).

Notes:
    - Canonical JSON:
        - sort_keys=True
        - separators=(",", ":")
        - ensure_ascii=False
    - Hashing is performed over the UTF-8 encoded canonical JSON string.
"""

from __future__ import annotations

import hashlib
import json
from typing import Any

from .descriptors import Descriptor
from .introspect import describe

__all__ = [
    "json_dumps_canonical",
    "fingerprint",
]


def json_dumps_canonical(obj: Any) -> str:
    """
    Serialize an object to a canonical JSON string.

    Args:
        obj (Any): JSON-serializable object.

    Returns:
        str: Canonical JSON string with sort_keys=True, compact separators,
        and ensure_ascii=False.
    """
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def _sha256_hexdigest(s: str) -> str:
    """Compute SHA-256 hex digest of a UTF-8 string."""
    h = hashlib.sha256()
    h.update(s.encode("utf-8"))
    return h.hexdigest()


def fingerprint(descriptor: Descriptor) -> str:
    """
    Stable structural hash of a descriptor tree.

    Args:
        descriptor (Descriptor): Root descriptor (must be acyclic).

    Returns:
        str: SHA-256 hex digest over the canonical JSON of ``describe(descriptor)``.

    Examples:
        >>> from shapekit.core.descriptors import StringType
        >>> fingerprint(StringType().list()) == fingerprint(StringType().list())
        True
    """
    payload = describe(descriptor).model_dump(mode="json")
    return _sha256_hexdigest(json_dumps_canonical(payload))
