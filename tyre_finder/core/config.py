"""Application configuration with environment variable validation."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env relative to the project root (3 levels up from this file)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Remote wheel/tyre catalog
    catalog_base_url: str = Field(
        default="http://172.105.37.163:5593/api/v1/wheels",
        validation_alias="CATALOG_BASE_URL",
    )
    catalog_timeout: float = Field(default=60.0, validation_alias="CATALOG_TIMEOUT")
    catalog_max_attempts: int = Field(
        default=3, ge=1, validation_alias="CATALOG_MAX_ATTEMPTS"
    )
    catalog_retry_delay: float = Field(
        default=2.0, ge=0, validation_alias="CATALOG_RETRY_DELAY"
    )

    # Storefront the product search links point at
    site_base_url: str = Field(
        default="http://localhost:8000/", validation_alias="SITE_BASE_URL"
    )

    # Product inventory (Supabase)
    supabase_url: str = Field(default="", validation_alias="SUPABASE_URL")
    supabase_key: str = Field(default="", validation_alias="SUPABASE_KEY")
    products_table: str = Field(default="products", validation_alias="PRODUCTS_TABLE")

    # CORS
    allowed_origins: list[str] | str = Field(
        default=["*"],
        validation_alias="ALLOWED_ORIGINS",
    )

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    @property
    def cors_origins(self) -> list[str]:
        """Parse ALLOWED_ORIGINS from comma-separated string or return list."""
        if isinstance(self.allowed_origins, str):
            return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]
        return self.allowed_origins


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


def validate_settings(settings: Settings | None = None) -> list[str]:
    """Return configuration problems that degrade the service.

    Missing Supabase credentials do not stop the API (every tyre is then
    reported as unavailable), so problems are returned for logging rather
    than raised.
    """
    settings = settings or get_settings()
    problems = []

    if not settings.catalog_base_url:
        problems.append("CATALOG_BASE_URL is empty")
    if not settings.supabase_url:
        problems.append("SUPABASE_URL is not set")
    if not settings.supabase_key:
        problems.append("SUPABASE_KEY is not set")

    return problems
