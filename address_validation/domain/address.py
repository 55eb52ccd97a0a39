# address_validation/domain/address.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from .parsing import get_first, get_nested, to_text

DEFAULT_COUNTRY = "US"

_LEADING_DIGITS = re.compile(r"^\d+")


@dataclass(frozen=True)
class AddressInput:
    """
    One mailing address as the caller knows it.

    Immutable: build a new one (dataclasses.replace) instead of mutating.
    Nothing here checks whether required fields are present; the remote
    service rejects incomplete addresses itself.
    """
    addressee: str = ""
    address_line1: str = ""
    address_line2: str = ""
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: str = DEFAULT_COUNTRY

    def __post_init__(self) -> None:
        for name in ("addressee", "address_line1", "address_line2", "city", "state", "postal_code"):
            object.__setattr__(self, name, to_text(getattr(self, name)))

        country = to_text(self.country).upper() or DEFAULT_COUNTRY
        if len(country) != 2 or not country.isalpha():
            raise ValueError(f"country must be a two-letter code, got {self.country!r}")
        object.__setattr__(self, "country", country)

    @property
    def address_line(self) -> str:
        # Always one separator, even when line 2 is empty (trailing space is kept).
        return f"{self.address_line1} {self.address_line2}"

    @property
    def wire_postal_code(self) -> str:
        """
        US postal codes go out in integer-compatible form (leading digits only,
        so ZIP+4 becomes the 5-digit ZIP). Elsewhere they may be alphanumeric.
        """
        if self.country != "US":
            return self.postal_code
        m = _LEADING_DIGITS.match(self.postal_code)
        return m.group(0) if m else ""

    @classmethod
    def from_mapping(cls, payload: dict[str, Any]) -> "AddressInput":
        """
        Build from a loosely keyed payload. Supports the usual camelCase/snake_case
        variants and a nested 'address' block.
        """
        line1 = get_first(payload, "address_line1", "addressLine1", "addressLine", "address", "street")
        if not line1 or isinstance(line1, dict):
            line1 = get_nested(payload, "address.line1") or get_nested(payload, "address.addressLine")

        line2 = get_first(payload, "address_line2", "addressLine2", "suite", "unit")
        if not line2:
            line2 = get_nested(payload, "address.line2")

        city = get_first(payload, "city") or get_nested(payload, "address.city")

        state = get_first(payload, "state", "stateCode", "province")
        if not state:
            state = get_nested(payload, "address.state") or get_nested(payload, "address.stateCode")

        zipc = get_first(payload, "postal_code", "postalCode", "zipCode", "zipcode", "zip")
        if not zipc:
            zipc = get_nested(payload, "address.zip") or get_nested(payload, "address.postalCode")

        country = get_first(payload, "country", "countryCode", "country_code") or DEFAULT_COUNTRY

        return cls(
            addressee=to_text(get_first(payload, "addressee", "consignee_name", "consigneeName", "name")),
            address_line1=to_text(line1),
            address_line2=to_text(line2),
            city=to_text(city),
            state=to_text(state),
            postal_code=to_text(zipc),
            country=to_text(country),
        )
