# address_validation/adapters/clients/soap.py
from __future__ import annotations

from typing import Any
from xml.parsers.expat import ExpatError

import xmltodict

from ...domain.parsing import as_list, get_first, get_nested
from .xav_contract import XavContract

MASK = "********"


class XavTransportError(Exception):
    """Anything that went wrong between us and a usable XAV response body."""


class MalformedEnvelopeError(XavTransportError):
    pass


class XavFault(XavTransportError):
    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        description: str | None = None,
        severity: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.description = description
        self.severity = severity


def _qualify(node: Any, prefix: str, overrides: dict[str, str] | None = None) -> Any:
    """Prefix every key; `overrides` switches the prefix for a top-level subtree."""
    if isinstance(node, dict):
        out: dict[str, Any] = {}
        for k, v in node.items():
            p = (overrides or {}).get(k, prefix)
            out[f"{p}:{k}"] = _qualify(v, p)
        return out
    if isinstance(node, list):
        return [_qualify(i, prefix) for i in node]
    return node


def mask_security_header(header: dict[str, Any]) -> dict[str, Any]:
    return {k: mask_security_header(v) if isinstance(v, dict) else MASK for k, v in header.items()}


def render_envelope(contract: XavContract, *, header: dict[str, Any], body: dict[str, Any]) -> str:
    """SOAP 1.1 envelope: UPSSecurity header + XAVRequest body."""
    doc = {
        "soapenv:Envelope": {
            "@xmlns:soapenv": contract.ns("soapenv"),
            "@xmlns:upss": contract.ns("upss"),
            "@xmlns:common": contract.ns("common"),
            "@xmlns:xav": contract.ns("xav"),
            "soapenv:Header": {"upss:UPSSecurity": _qualify(header, "upss")},
            "soapenv:Body": {"xav:XAVRequest": _qualify(body, "xav", {"Request": "common"})},
        }
    }
    return xmltodict.unparse(doc)


def _raise_fault(fault: Any) -> None:
    if not isinstance(fault, dict):
        raise XavFault("SOAP fault")

    faultstring = get_first(fault, "faultstring")
    details = get_nested(fault, "detail.error:Errors") or {}

    code = description = severity = None
    for d in as_list(details.get("error:ErrorDetail") if isinstance(details, dict) else None):
        if not isinstance(d, dict):
            continue
        severity = get_first(d, "error:Severity")
        primary = d.get("error:PrimaryErrorCode") or {}
        if isinstance(primary, dict):
            code = get_first(primary, "error:Code")
            description = get_first(primary, "error:Description")
        break

    if code or description:
        msg = f"UPS fault {code or '?'}: {description or faultstring or 'no description'}"
    else:
        msg = f"SOAP fault: {faultstring or 'no faultstring'}"
    raise XavFault(msg, code=code, description=description, severity=severity)


def decode_envelope(contract: XavContract, text: str) -> dict[str, Any]:
    """
    Decode a response envelope and return only its Body content.

    Namespaces are collapsed onto the contract's prefixes so keys are stable
    ('xav:XAVResponse', 'xav:Candidate', ...) whatever prefixes the server used.
    Repeated elements come back as lists in document order.
    """
    try:
        doc = xmltodict.parse(text, process_namespaces=True, namespaces=contract.namespace_prefixes)
    except ExpatError as e:
        raise MalformedEnvelopeError(f"response is not well-formed XML: {e}") from e

    envelope = doc.get("soapenv:Envelope") if isinstance(doc, dict) else None
    if not isinstance(envelope, dict):
        raise MalformedEnvelopeError("response has no SOAP Envelope")

    body = envelope.get("soapenv:Body")
    if not isinstance(body, dict):
        raise MalformedEnvelopeError("response envelope has no Body content")

    if "soapenv:Fault" in body:
        _raise_fault(body["soapenv:Fault"])

    # An XAVResponse in a namespace the contract does not map lands under its
    # full URI, so this also catches a server speaking another schema version.
    if not isinstance(body.get("xav:XAVResponse"), dict):
        raise MalformedEnvelopeError("response Body has no xav:XAVResponse")

    return dict(body)
