# address_validation/adapters/clients/xav_contract.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import xmltodict

from ...domain.parsing import as_list

BUNDLED_WSDL = Path(__file__).resolve().parents[2] / "resources" / "XAV.wsdl"

DEFAULT_OPERATION = "ProcessXAV"

# Prefixes the codec and the response readers rely on.
REQUIRED_PREFIXES = ("soapenv", "upss", "common", "xav", "error")


class ContractError(ValueError):
    """The wire-contract description is missing, unreadable or incomplete."""


@dataclass(frozen=True)
class XavContract:
    endpoint_url: str
    operation: str
    soap_action: str
    namespaces: dict[str, str]

    @property
    def namespace_prefixes(self) -> dict[str, str]:
        """uri -> prefix, the shape xmltodict wants for namespace collapsing."""
        return {uri: prefix for prefix, uri in self.namespaces.items()}

    def ns(self, prefix: str) -> str:
        return self.namespaces[prefix]


def _namespaces(defs: dict[str, Any]) -> dict[str, str]:
    out: dict[str, str] = {}
    for k, v in defs.items():
        if k.startswith("@xmlns:"):
            out[k[len("@xmlns:"):]] = str(v)
    return out


def parse_contract(text: str, *, operation: str = DEFAULT_OPERATION) -> XavContract:
    try:
        doc = xmltodict.parse(
            text,
            force_list=("wsdl:service", "wsdl:port", "wsdl:binding", "wsdl:operation"),
        )
    except Exception as e:
        raise ContractError(f"unreadable WSDL: {e}") from e

    defs = doc.get("wsdl:definitions") if isinstance(doc, dict) else None
    if not isinstance(defs, dict):
        raise ContractError("WSDL has no wsdl:definitions root")

    namespaces = _namespaces(defs)
    missing = [p for p in REQUIRED_PREFIXES if p not in namespaces]
    if missing:
        raise ContractError(f"WSDL does not declare namespace prefixes: {missing}")

    soap_action: str | None = None
    for binding in as_list(defs.get("wsdl:binding")):
        for op in as_list(binding.get("wsdl:operation") if isinstance(binding, dict) else None):
            if isinstance(op, dict) and op.get("@name") == operation:
                soap_op = op.get("soap:operation") or {}
                soap_action = soap_op.get("@soapAction") if isinstance(soap_op, dict) else None
                break
        if soap_action:
            break
    if not soap_action:
        raise ContractError(f"WSDL binding has no soapAction for operation {operation!r}")

    endpoint: str | None = None
    for service in as_list(defs.get("wsdl:service")):
        for port in as_list(service.get("wsdl:port") if isinstance(service, dict) else None):
            addr = port.get("soap:address") if isinstance(port, dict) else None
            if isinstance(addr, dict) and addr.get("@location"):
                endpoint = str(addr["@location"])
                break
        if endpoint:
            break
    if not endpoint:
        raise ContractError("WSDL service has no soap:address location")

    return XavContract(
        endpoint_url=endpoint,
        operation=operation,
        soap_action=str(soap_action),
        namespaces=namespaces,
    )


def load_contract(path: str | Path | None = None, *, operation: str = DEFAULT_OPERATION) -> XavContract:
    p = Path(path) if path else BUNDLED_WSDL
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise ContractError(f"cannot read WSDL at {p}: {e}") from e
    return parse_contract(text, operation=operation)
