# address_validation/domain/suggestions.py
from __future__ import annotations

from typing import Any

from .parsing import as_list, get_first, strip_prefixes

XAV_RESPONSE = "xav:XAVResponse"

_INDICATORS = (
    ("xav:ValidAddressIndicator", "valid"),
    ("xav:AmbiguousAddressIndicator", "ambiguous"),
    ("xav:NoCandidatesIndicator", "no_candidates"),
)


def _xav_response(decoded: dict[str, Any] | None) -> dict[str, Any]:
    if not isinstance(decoded, dict):
        return {}
    resp = decoded.get(XAV_RESPONSE)
    return resp if isinstance(resp, dict) else {}


def has_valid_indicator(decoded: dict[str, Any] | None) -> bool:
    # Presence is what counts; the element is normally empty (decodes to None).
    return "xav:ValidAddressIndicator" in _xav_response(decoded)


def read_indicator(decoded: dict[str, Any] | None) -> str | None:
    resp = _xav_response(decoded)
    for key, name in _INDICATORS:
        if key in resp:
            return name
    return None


def read_classification(decoded: dict[str, Any] | None) -> dict[str, Any] | None:
    block = _xav_response(decoded).get("xav:AddressClassification")
    if not isinstance(block, dict):
        return None
    return {
        "code": get_first(block, "xav:Code"),
        "description": get_first(block, "xav:Description"),
    }


def extract_suggestions(decoded: dict[str, Any] | None) -> list[dict[str, Any]]:
    """
    One address-key-format mapping per xav:Candidate, in document order.

    A single candidate decodes to a mapping, several to a list of mappings;
    both shapes (and no candidates at all) are handled. Keys are returned
    without their namespace prefix so they match the request field names.
    """
    out: list[dict[str, Any]] = []
    for candidate in as_list(_xav_response(decoded).get("xav:Candidate")):
        if not isinstance(candidate, dict):
            continue
        akf = candidate.get("xav:AddressKeyFormat")
        if not isinstance(akf, dict):
            continue
        out.append(strip_prefixes(akf))
    return out
