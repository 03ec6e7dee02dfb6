"""Client configuration and settings management."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.aleph-alpha.com"


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="INFERENCE_CLIENT_", extra="ignore")

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the inference API. Task paths are appended to it.",
    )
    api_token: Optional[str] = Field(
        default=None,
        description="Token sent as a bearer credential with every request.",
    )
    timeout: float = Field(
        default=120.0,
        gt=0,
        description="Timeout in seconds for a single request.",
    )
    default_model: str = Field(
        default="luminous-base",
        description="Model used when the caller does not name one.",
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached client settings."""

    return Settings()
