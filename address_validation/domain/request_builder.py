# address_validation/domain/request_builder.py
from __future__ import annotations

from typing import Any

from .address import AddressInput
from .types import Credentials

# 3 = address validation + classification, with candidate list when unconfirmed.
# Fixed by the UPS XAV contract, not a tuning knob.
REQUEST_OPTION = "3"


def build_xav_request(address: AddressInput) -> dict[str, Any]:
    return {
        "Request": {"RequestOption": REQUEST_OPTION},
        "AddressKeyFormat": {
            "ConsigneeName": address.addressee,
            "AddressLine": address.address_line,
            "PoliticalDivision2": address.city,
            "PoliticalDivision1": address.state,
            "PostcodePrimaryLow": address.wire_postal_code,
            "CountryCode": address.country,
        },
    }


def build_security_header(credentials: Credentials) -> dict[str, Any]:
    return {
        "UsernameToken": {
            "Username": credentials.user_id,
            "Password": credentials.password,
        },
        "ServiceAccessToken": {
            "AccessLicenseNumber": credentials.access_key,
        },
    }
