from typing import Any, Literal

from pydantic import BaseModel, Field


class AddressValidateIn(BaseModel):
    addressee: str = ""
    address_line1: str = ""
    address_line2: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: str = Field("US", min_length=2, max_length=2)


class RawExchangeOut(BaseModel):
    request: str | None = None
    response: str | None = None


class AddressValidateOut(BaseModel):
    status: int = 200
    outcome: Literal["not_started", "valid", "invalid", "failed"]
    success: bool | None = None
    suggestions: list[dict[str, Any]] | Literal[False] = False
    indicator: str | None = None
    classification: dict[str, Any] | None = None
    results: dict[str, Any] | None = None
    errors: dict[str, str] | Literal[False] = False
    raw: RawExchangeOut
