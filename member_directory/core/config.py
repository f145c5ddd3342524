# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration: all env-driven, read once at import.
The Portal client never reads the environment itself: it is handed a
PortalSettings value built here (or by a test).
"""

import os
from dataclasses import dataclass


def _first_env(*names: str, default: str = "") -> str:
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return default


@dataclass(frozen=True)
class PortalSettings:
    """Connection parameters for the community Portal API."""
    base_url: str = ""
    api_key: str = ""
    timeout: float = 10.0
    asset_base_url: str = ""
    cache_ttl: float = 0.0
    cache_max_entries: int = 256

    @property
    def is_configured(self) -> bool:
        return bool(self.base_url and self.api_key)


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "member-directory")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    SERVICE_PORT: int = int(os.getenv("SERVICE_PORT", "8005"))

    PORTAL_API_URL: str = _first_env("PORTAL_API_URL", "NEXT_PUBLIC_PORTAL_API_URL").rstrip("/")
    PORTAL_API_KEY: str = _first_env("PORTAL_API_KEY", "NEXT_PUBLIC_PORTAL_API_KEY")
    PORTAL_TIMEOUT: float = float(os.getenv("PORTAL_TIMEOUT", "10.0"))
    PORTAL_ASSET_BASE_URL: str = os.getenv("PORTAL_ASSET_BASE_URL", "").rstrip("/")

    # 0 disables the response cache
    PORTAL_CACHE_TTL: float = float(os.getenv("PORTAL_CACHE_TTL", "0"))
    PORTAL_CACHE_MAX_ENTRIES: int = int(os.getenv("PORTAL_CACHE_MAX_ENTRIES", "256"))

    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def portal(self) -> PortalSettings:
        return PortalSettings(
            base_url=self.PORTAL_API_URL,
            api_key=self.PORTAL_API_KEY,
            timeout=self.PORTAL_TIMEOUT,
            asset_base_url=self.PORTAL_ASSET_BASE_URL,
            cache_ttl=self.PORTAL_CACHE_TTL,
            cache_max_entries=self.PORTAL_CACHE_MAX_ENTRIES,
        )


settings = Settings()
