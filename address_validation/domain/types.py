# address_validation/domain/types.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Verdict(str, Enum):
    not_started = "not_started"
    valid = "valid"
    invalid = "invalid"
    failed = "failed"


class ErrorKind(str, Enum):
    transport = "transport"
    application = "application"


def _redact(v: str | None) -> str | None:
    if not v:
        return v
    if len(v) <= 8:
        return "***"
    return v[:4] + "***" + v[-4:]


@dataclass(frozen=True)
class Credentials:
    access_key: str = field(repr=False)
    user_id: str
    password: str = field(repr=False)

    def redacted(self) -> dict[str, Any]:
        return {
            "user_id": self.user_id,
            "access_key": _redact(self.access_key),
            "password_set": bool(self.password),
        }


@dataclass(frozen=True)
class ValidationFailure:
    kind: ErrorKind
    detail: str


@dataclass(frozen=True)
class ValidationOutcome:
    """
    Tagged result of one validation:
      valid   -> suggestions empty, failure None
      invalid -> suggestions (0..N), failure None
      failed  -> failure set; the service was never (successfully) consulted
    """
    verdict: Verdict
    suggestions: tuple[dict[str, Any], ...] = ()
    failure: ValidationFailure | None = None
    indicator: str | None = None
    classification: dict[str, Any] | None = None

    @property
    def is_valid(self) -> bool | None:
        if self.verdict == Verdict.valid:
            return True
        if self.verdict == Verdict.invalid:
            return False
        return None
