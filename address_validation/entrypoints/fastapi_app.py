# address_validation/entrypoints/fastapi_app.py
from __future__ import annotations

from fastapi import FastAPI

from .api.routers import address, health


def create_app() -> FastAPI:
    app = FastAPI(title="UPS Address Validation")

    # Routers
    app.include_router(health.router)
    app.include_router(address.router)

    return app
