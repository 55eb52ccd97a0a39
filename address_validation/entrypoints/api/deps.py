# address_validation/entrypoints/api/deps.py
from __future__ import annotations

import httpx
from fastapi import Header, HTTPException

from ...config import settings
from ...domain.types import Credentials


def require_api_key(x_api_key: str | None = Header(default=None, alias="X-API-Key")) -> None:
    if settings.API_KEY:
        if not x_api_key or x_api_key != settings.API_KEY:
            raise HTTPException(status_code=401, detail="Invalid API key")


def ups_credentials() -> Credentials:
    if not (settings.UPS_ACCESS_KEY and settings.UPS_USER_ID and settings.UPS_PASSWORD):
        raise HTTPException(status_code=503, detail="UPS credentials are not configured")
    return Credentials(
        access_key=settings.UPS_ACCESS_KEY,
        user_id=settings.UPS_USER_ID,
        password=settings.UPS_PASSWORD,
    )


def xav_http_client() -> httpx.Client | None:
    # None -> each validation opens its own short-lived client.
    # Override (app.dependency_overrides) to share a pooled client.
    return None
