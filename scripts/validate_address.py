from __future__ import annotations

import argparse
import json
import logging
import sys

from address_validation.config import settings
from address_validation.domain.address import AddressInput
from address_validation.domain.types import Credentials
from address_validation.service_layer.validation_session import validate_address


def _quiet_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(levelname)s:%(name)s:%(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def main() -> int:
    ap = argparse.ArgumentParser(description="Validate one address against UPS XAV")
    ap.add_argument("--addressee", default="")
    ap.add_argument("--line1", required=True)
    ap.add_argument("--line2", default="")
    ap.add_argument("--city", default="")
    ap.add_argument("--state", default="")
    ap.add_argument("--zip", dest="postal_code", default="")
    ap.add_argument("--country", default="US")
    ap.add_argument("--raw", action="store_true", help="include raw request/response in output")
    args = ap.parse_args()

    _quiet_logging()

    if not (settings.UPS_ACCESS_KEY and settings.UPS_USER_ID and settings.UPS_PASSWORD):
        print("Set UPS_ACCESS_KEY, UPS_USER_ID and UPS_PASSWORD (env or .env)", file=sys.stderr)
        return 2

    creds = Credentials(
        access_key=settings.UPS_ACCESS_KEY,
        user_id=settings.UPS_USER_ID,
        password=settings.UPS_PASSWORD,
    )
    address = AddressInput(
        addressee=args.addressee,
        address_line1=args.line1,
        address_line2=args.line2,
        city=args.city,
        state=args.state,
        postal_code=args.postal_code,
        country=args.country,
    )

    session = validate_address(
        creds,
        address,
        contract_path=settings.XAV_CONTRACT_PATH,
        endpoint_url=settings.XAV_ENDPOINT_URL,
        timeout_s=settings.XAV_HTTP_TIMEOUT_S,
        redact_raw=settings.XAV_REDACT_RAW,
    )

    result = session.get_result()
    if not args.raw:
        result.pop("raw", None)
    print(json.dumps(result, indent=2, default=str))

    return 1 if session.outcome.failure else 0


if __name__ == "__main__":
    raise SystemExit(main())
