from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    accepted_formats: tuple[str, ...] = Field(default=("4.0", "3.1"), min_length=1)
    freshness_months: int = Field(default=1, ge=1)

    max_workers: int = Field(default=1, ge=1)
