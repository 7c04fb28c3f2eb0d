"""
Environment-driven settings for CleanFlux clients.

Constructor arguments are always authoritative; these settings are only
consulted by CleanFlux.from_env() and CleanFluxSync.from_env().
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cleanflux.core import DEFAULT_BASE_URL, DEFAULT_TIMEOUT


class ClientSettings(BaseSettings):
    """CleanFlux client configuration read from CLEANFLUX_* variables."""

    api_key: Optional[str] = Field(
        default=None,
        description="API key sent in the x-api-key header",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the CleanFlux API",
    )

    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    model_config = SettingsConfigDict(env_prefix="CLEANFLUX_", extra="ignore")

    def __repr__(self) -> str:
        masked = "***" if self.api_key else None
        return (
            f"ClientSettings(api_key={masked!r}, base_url={self.base_url!r}, "
            f"timeout={self.timeout!r})"
        )


@lru_cache
def get_client_settings() -> ClientSettings:
    """Get client settings with caching."""
    return ClientSettings()


def clear_settings_cache() -> None:
    """Clear the cached settings so the environment is read again."""
    get_client_settings.cache_clear()
