"""Environment-backed settings for the moviedb client."""

from datetime import timedelta

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    api_key: str = Field(alias="MOVIEDB_API_KEY")
    base_url: str = Field(default="https://api.themoviedb.org/3", alias="MOVIEDB_BASE_URL")
    images_base_url: str = Field(
        default="https://image.tmdb.org/t/p", alias="MOVIEDB_IMAGES_BASE_URL"
    )
    cache_enabled: bool = Field(default=True, alias="MOVIEDB_CACHE_ENABLED")
    cache_expiry_seconds: int = Field(default=30 * 60, ge=0, alias="MOVIEDB_CACHE_EXPIRY")
    cache_max_size: int = Field(default=10_000, ge=1, alias="MOVIEDB_CACHE_MAX_SIZE")
    timeout: float = Field(default=30.0, gt=0, alias="MOVIEDB_TIMEOUT")
    debug_modules: str | None = Field(default=None, alias="DEBUG_MODULES")

    @property
    def cache_expiry(self) -> timedelta:
        return timedelta(seconds=self.cache_expiry_seconds)
