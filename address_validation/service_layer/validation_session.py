# address_validation/service_layer/validation_session.py
from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any

import httpx

from ..adapters.clients.soap import XavTransportError, mask_security_header, render_envelope
from ..adapters.clients.ups_xav import DEFAULT_TIMEOUT_S, XavClient
from ..adapters.clients.xav_contract import XavContract, load_contract
from ..domain.address import AddressInput
from ..domain.request_builder import build_security_header, build_xav_request
from ..domain.suggestions import extract_suggestions, has_valid_indicator, read_classification, read_indicator
from ..domain.types import Credentials, ErrorKind, ValidationFailure, ValidationOutcome, Verdict

log = logging.getLogger(__name__)


class SessionPhase(str, Enum):
    not_started = "not_started"
    sent = "sent"
    decoded = "decoded"
    done = "done"


class ValidationSession:
    """
    One address, one request/response cycle.

    validate() never raises: transport and application failures are recorded
    under `errors` and surface as Verdict.failed, which is distinct from an
    address the service looked at and could not confirm (Verdict.invalid).
    Sessions are single-shot; build a new one per address.
    """

    def __init__(
        self,
        credentials: Credentials,
        address: AddressInput,
        *,
        contract: XavContract | None = None,
        contract_path: str | Path | None = None,
        endpoint_url: str | None = None,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        client: httpx.Client | None = None,
        redact_raw: bool = True,
    ) -> None:
        self.credentials = credentials
        self.address = address
        self.redact_raw = redact_raw

        self._contract = contract
        self._contract_path = contract_path
        self._endpoint_url = endpoint_url
        self._timeout_s = timeout_s
        self._client = client

        self.phase = SessionPhase.not_started
        self._is_valid: bool | None = None
        self._decoded: dict[str, Any] | None = None
        self._raw_request: str | None = None
        self._raw_response: str | None = None
        self._errors: dict[str, str] = {}
        self._failure: ValidationFailure | None = None
        self._suggestions: list[dict[str, Any]] | None = None

    # --- lifecycle ---

    def validate(self) -> "ValidationSession":
        if self.phase != SessionPhase.not_started:
            log.warning("validate() called again on a finished session; ignoring")
            return self

        try:
            contract = self._contract or load_contract(self._contract_path)
            xav = XavClient(
                contract,
                endpoint_url=self._endpoint_url,
                timeout_s=self._timeout_s,
                client=self._client,
            )

            header = build_security_header(self.credentials)
            body = build_xav_request(self.address)
            envelope = render_envelope(contract, header=header, body=body)
            if self.redact_raw:
                self._raw_request = render_envelope(contract, header=mask_security_header(header), body=body)
            else:
                self._raw_request = envelope

            self.phase = SessionPhase.sent
            exchange = xav.post(envelope)
            self._raw_response = exchange.text

            self._decoded = xav.read_body(exchange)
            self.phase = SessionPhase.decoded
        except XavTransportError as e:
            return self._fail(ErrorKind.transport, e)
        except Exception as e:
            return self._fail(ErrorKind.application, e)

        self._is_valid = has_valid_indicator(self._decoded)
        self.phase = SessionPhase.done
        log.info(
            "xav validation finished: verdict=%s indicator=%s country=%s",
            self.verdict.value,
            read_indicator(self._decoded),
            self.address.country,
        )
        return self

    def _fail(self, kind: ErrorKind, exc: Exception) -> "ValidationSession":
        detail = str(exc) or type(exc).__name__
        self._failure = ValidationFailure(kind=kind, detail=detail)
        self._errors[kind.value] = detail
        self.phase = SessionPhase.done
        log.warning("xav validation failed: kind=%s error=%s detail=%s", kind.value, type(exc).__name__, detail)
        return self

    # --- state ---

    def is_valid(self) -> bool | None:
        return self._is_valid

    @property
    def verdict(self) -> Verdict:
        if self._failure is not None:
            return Verdict.failed
        if self._is_valid is None:
            return Verdict.not_started
        return Verdict.valid if self._is_valid else Verdict.invalid

    @property
    def decoded_response(self) -> dict[str, Any] | None:
        return self._decoded

    @property
    def raw_request(self) -> str | None:
        return self._raw_request

    @property
    def raw_response(self) -> str | None:
        return self._raw_response

    @property
    def errors(self) -> dict[str, str]:
        return dict(self._errors)

    @property
    def suggestions(self) -> list[dict[str, Any]]:
        """Candidates are only pulled out of the response when first asked for."""
        if self.verdict != Verdict.invalid:
            return []
        if self._suggestions is None:
            self._suggestions = extract_suggestions(self._decoded)
        return list(self._suggestions)

    @property
    def outcome(self) -> ValidationOutcome:
        return ValidationOutcome(
            verdict=self.verdict,
            suggestions=tuple(self.suggestions),
            failure=self._failure,
            indicator=read_indicator(self._decoded),
            classification=read_classification(self._decoded),
        )

    # --- payload ---

    def get_result(self) -> dict[str, Any]:
        """
        Stable payload shape: every key is always present, `False`/`None`
        mark "not applicable".
        """
        verdict = self.verdict
        return {
            "status": 200,
            "outcome": verdict.value,
            "success": self._is_valid,
            "suggestions": self.suggestions if verdict == Verdict.invalid else False,
            "indicator": read_indicator(self._decoded),
            "classification": read_classification(self._decoded),
            "results": self._decoded,
            "errors": dict(self._errors) if self._errors else False,
            "raw": {
                "request": self._raw_request,
                "response": self._raw_response,
            },
        }

    def to_json(self) -> str:
        return json.dumps(self.get_result(), default=str)


def validate_address(
    credentials: Credentials,
    address: AddressInput,
    **kwargs: Any,
) -> ValidationSession:
    """Convenience: build a fresh session and run it."""
    return ValidationSession(credentials, address, **kwargs).validate()
