from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables with PROVIDER_SCHEMA_ prefix."""

    # App
    debug: bool = False
    log_level: str = "INFO"
    # Routing
    schema_prefix: str = "/schema"

    model_config = SettingsConfigDict(env_prefix="PROVIDER_SCHEMA_", env_file=".env")


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""
    return Settings()
