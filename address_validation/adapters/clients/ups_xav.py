# address_validation/adapters/clients/ups_xav.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx

from .soap import MalformedEnvelopeError, XavTransportError, decode_envelope
from .xav_contract import XavContract

DEFAULT_TIMEOUT_S = 30.0


@dataclass(frozen=True)
class XavExchange:
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class XavClient:
    """
    Blocking SOAP-over-HTTPS client for the XAV endpoint.

    Pass `client` to reuse a pooled httpx.Client across validations;
    otherwise a short-lived client is opened per call. No retries.
    """

    def __init__(
        self,
        contract: XavContract,
        *,
        endpoint_url: str | None = None,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        client: httpx.Client | None = None,
    ) -> None:
        self.contract = contract
        self.endpoint_url = (endpoint_url or contract.endpoint_url).rstrip("/")
        self.timeout_s = float(timeout_s)
        self._client = client

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "text/xml; charset=utf-8",
            "SOAPAction": f'"{self.contract.soap_action}"',
            "accept": "text/xml",
        }

    def post(self, envelope: str) -> XavExchange:
        timeout = httpx.Timeout(self.timeout_s)
        body = envelope.encode("utf-8")
        try:
            if self._client is not None:
                r = self._client.post(self.endpoint_url, content=body, headers=self._headers(), timeout=timeout)
            else:
                with httpx.Client(timeout=timeout) as client:
                    r = client.post(self.endpoint_url, content=body, headers=self._headers())
        except httpx.TimeoutException as e:
            raise XavTransportError(f"timeout after {self.timeout_s:g}s calling {self.endpoint_url}") from e
        except httpx.HTTPError as e:
            raise XavTransportError(f"{type(e).__name__}: {e}") from e

        return XavExchange(status_code=r.status_code, text=r.text)

    def read_body(self, exchange: XavExchange) -> dict[str, Any]:
        """
        SOAP faults arrive with HTTP 500, so the envelope is decoded before the
        status is looked at; a fault wins over a bare status error.
        """
        try:
            body = decode_envelope(self.contract, exchange.text)
        except MalformedEnvelopeError:
            if not exchange.ok:
                raise XavTransportError(f"HTTP {exchange.status_code}: {exchange.text[:500]}")
            raise

        if not exchange.ok:
            raise XavTransportError(f"HTTP {exchange.status_code} with a non-fault body")
        return body
