# address_validation/domain/parsing.py
from __future__ import annotations

from typing import Any


def to_text(x: Any) -> str:
    if x is None:
        return ""
    return str(x).strip()


def get_first(payload: dict[str, Any], *keys: str) -> Any:
    """Return first non-empty key from payload."""
    for k in keys:
        v = payload.get(k)
        if v is None:
            continue
        if isinstance(v, str) and not v.strip():
            continue
        return v
    return None


def get_nested(payload: dict[str, Any], path: str) -> Any:
    """Tiny dot-path getter: 'address.line1' or 'address.city'."""
    cur: Any = payload
    for part in path.split("."):
        if not isinstance(cur, dict):
            return None
        cur = cur.get(part)
        if cur is None:
            return None
    return cur


def as_list(x: Any) -> list[Any]:
    """
    Decoded XML gives a mapping for one repeated element and a list for many.
    Normalize both (and absence) to a list.
    """
    if x is None:
        return []
    if isinstance(x, list):
        return x
    return [x]


def local_name(qname: str) -> str:
    """'xav:AddressLine' -> 'AddressLine'."""
    return qname.rsplit(":", 1)[-1]


def strip_prefixes(mapping: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for k, v in mapping.items():
        if k.startswith("@xmlns"):
            continue
        if isinstance(v, dict):
            v = strip_prefixes(v)
        elif isinstance(v, list):
            v = [strip_prefixes(i) if isinstance(i, dict) else i for i in v]
        out[local_name(k)] = v
    return out
