# address_validation/entrypoints/api/routers/address.py
from __future__ import annotations

import httpx
from fastapi import APIRouter, Depends, HTTPException

from ..deps import require_api_key, ups_credentials, xav_http_client
from ....config import settings
from ....domain.address import AddressInput
from ....domain.types import Credentials
from ....schemas import AddressValidateIn, AddressValidateOut
from ....service_layer.validation_session import ValidationSession

router = APIRouter(tags=["address"], dependencies=[Depends(require_api_key)])


@router.post("/address/validate", response_model=AddressValidateOut)
def validate_address(
    body: AddressValidateIn,
    credentials: Credentials = Depends(ups_credentials),
    client: httpx.Client | None = Depends(xav_http_client),
) -> AddressValidateOut:
    try:
        address = AddressInput(**body.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    session = ValidationSession(
        credentials,
        address,
        contract_path=settings.XAV_CONTRACT_PATH,
        endpoint_url=settings.XAV_ENDPOINT_URL,
        timeout_s=settings.XAV_HTTP_TIMEOUT_S,
        client=client,
        redact_raw=settings.XAV_REDACT_RAW,
    ).validate()

    return AddressValidateOut(**session.get_result())
