from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # --- Runtime ---
    ENV: str = "dev"  # dev|prod
    LOG_LEVEL: str = "INFO"

    # --- Minimal B2B Auth (API key) ---
    # Send: X-API-Key: <key>
    API_KEY: str | None = None

    # --- UPS credentials (issued with XAV API access) ---
    UPS_ACCESS_KEY: str | None = None
    UPS_USER_ID: str | None = None
    UPS_PASSWORD: str | None = None

    # --- XAV wire contract / transport ---
    # Endpoint is read from the WSDL; override only to point at another host.
    XAV_ENDPOINT_URL: str | None = None
    # None -> bundled resources/XAV.wsdl
    XAV_CONTRACT_PATH: str | None = None
    XAV_HTTP_TIMEOUT_S: float = 30.0
    # Mask credentials inside the raw request kept for diagnostics
    XAV_REDACT_RAW: bool = True


settings = Settings()
