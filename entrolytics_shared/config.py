"""
Environment & Endpoint Configuration

Holds the Entrolytics API base URLs and resolves the default host once,
at import time, from the environment indicator.

Usage:
    from entrolytics_shared.config import DEFAULT_API_HOST, get_api_url

    url = get_api_url("website_by_id", "42")
    # http://localhost:3000/api/websites/42 outside production
"""

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from entrolytics_shared.api_routes import get_api_route

logger = logging.getLogger(__name__)


PRODUCTION = "production"
DEVELOPMENT = "development"

API_ENDPOINTS = MappingProxyType({
    PRODUCTION: "https://edge.entrolytics.click",
    DEVELOPMENT: "http://localhost:3000",
})


class SharedSettings(BaseSettings):
    """Environment indicator shared by every Entrolytics consumer"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ENTROLYTICS_ENV wins; NODE_ENV is what the JavaScript tooling already sets
    environment: str = Field(
        default=DEVELOPMENT,
        validation_alias=AliasChoices("ENTROLYTICS_ENV", "NODE_ENV"),
    )

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == PRODUCTION


@lru_cache()
def get_settings() -> SharedSettings:
    """Get cached shared settings"""
    return SharedSettings()


def resolve_default_api_host(settings: Optional[SharedSettings] = None) -> str:
    """
    Pick the API base URL for the current environment.

    Production selects the edge endpoint; every other environment value
    (including unset) selects the local development server.
    """
    settings = settings or get_settings()
    host = API_ENDPOINTS[PRODUCTION] if settings.is_production else API_ENDPOINTS[DEVELOPMENT]
    logger.debug(f"Resolved default API host: environment={settings.environment}, host={host}")
    return host


DEFAULT_API_HOST = resolve_default_api_host()


def get_api_url(route: str, *args: str, host: Optional[str] = None) -> str:
    """Build an absolute URL for a route key against a host (default: DEFAULT_API_HOST)"""
    base = (host or DEFAULT_API_HOST).rstrip("/")
    return f"{base}{get_api_route(route, *args)}"
