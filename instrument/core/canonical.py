"""
Canonical serialization for snapshots.

Exported lifted state goes through these functions so the same history always
produces the same bytes (and therefore the same snapshot hash).
"""

import json
from typing import Any


def canonicalize(obj: Any) -> Any:
    """
    Convert arbitrary nested dict/list to canonical form.

    Rules:
    - dict keys converted to strings (action ids are ints) and sorted
    - tuples converted to lists
    - recursive normalization
    """
    if isinstance(obj, dict):
        return {str(k): canonicalize(obj[k]) for k in sorted(obj.keys(), key=str)}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    return obj


def canonical_json_bytes(obj: Any) -> bytes:
    """
    Deterministic JSON bytes for hashing.

    Returns:
        UTF-8 encoded JSON bytes, sorted keys, no whitespace
    """
    canon = canonicalize(obj)
    s = json.dumps(canon, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return s.encode("utf-8")


def canonical_json_str(obj: Any, indent: Any = None) -> str:
    """
    Deterministic JSON string (for display or storage).

    With indent set the output is pretty-printed but key order stays canonical.
    """
    if indent is None:
        return canonical_json_bytes(obj).decode("utf-8")
    return json.dumps(canonicalize(obj), sort_keys=True, indent=indent, ensure_ascii=False)
