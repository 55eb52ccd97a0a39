# address_validation/entrypoints/api/routers/health.py
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from ..deps import require_api_key
from ....adapters.clients.xav_contract import BUNDLED_WSDL
from ....config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/debug/config", dependencies=[Depends(require_api_key)])
def debug_config() -> dict[str, Any]:
    def _redact(v: str | None) -> str | None:
        if not v:
            return v
        if len(v) <= 8:
            return "***"
        return v[:4] + "***" + v[-4:]

    return {
        "ENV": settings.ENV,
        "UPS_USER_ID": settings.UPS_USER_ID,
        "UPS_ACCESS_KEY": _redact(settings.UPS_ACCESS_KEY),
        "UPS_PASSWORD_SET": bool(settings.UPS_PASSWORD),
        "XAV_ENDPOINT_URL": settings.XAV_ENDPOINT_URL,
        "XAV_CONTRACT_PATH": settings.XAV_CONTRACT_PATH or str(BUNDLED_WSDL),
        "XAV_HTTP_TIMEOUT_S": settings.XAV_HTTP_TIMEOUT_S,
        "XAV_REDACT_RAW": settings.XAV_REDACT_RAW,
    }
