"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - default_locale is always one of supported_locales
    - get_settings() is cached (lru_cache) - single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box for local development
"""

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from business_warnings.core.domain_types import Locale


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Localization
    default_locale: Locale = Locale.EN_CA
    supported_locales: list[Locale] = [Locale.EN_CA, Locale.FR_CA]

    # Resolve every dialog for every locale at startup (fail fast on catalog gaps)
    validate_catalog_on_startup: bool = True

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @model_validator(mode="after")
    def default_locale_is_supported(self) -> "Settings":
        if self.default_locale not in self.supported_locales:
            raise ValueError(
                f"default_locale {self.default_locale.value} "
                f"not in supported_locales",
            )
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
