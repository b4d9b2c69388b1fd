"""Application configuration via pydantic-settings.

Values come from OS environment variables and an optional .env file at the
project root. The .env file takes precedence over OS-level environment
variables so stale shell exports never shadow the project config.
"""

from pathlib import Path
from typing import Tuple, Type

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

# lingoproxy/core/config.py → project root
_ENV_FILE = Path(__file__).resolve().parents[2] / ".env"

MYMEMORY_URL = "https://api.mymemory.translated.net/get"


class Settings(BaseSettings):
    """Central application settings. .env file wins over OS env vars."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Override source priority: .env file > OS env vars > defaults."""
        return (init_settings, dotenv_settings, env_settings, file_secret_settings)

    # --- Server ---
    host: str = "0.0.0.0"
    port: int = 3000

    # --- Translation provider ---
    provider_url: str = MYMEMORY_URL
    provider_timeout_seconds: float = 5.0

    # --- App ---
    app_env: str = "development"
    log_level: str = "INFO"
    cors_allow_origins: str = ""

    @property
    def cors_origins(self) -> list[str]:
        """Comma-separated CORS_ALLOW_ORIGINS, or ["*"] when unset."""
        origins = [o.strip() for o in self.cors_allow_origins.split(",") if o.strip()]
        return origins or ["*"]


settings = Settings()
