"""Configuration management using pydantic-settings."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Keys
    openai_api_key: Optional[str] = None

    # Prompt defaults
    default_model: str = "gpt-4o-mini"
    default_prompt_kind: str = "ENHANCE"
    default_language: str = "JavaScript"
    max_input_length: int = 20000

    # Application Settings
    debug: bool = False
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Model call behaviour
    model_timeout: int = 120
    retry_max_attempts: int = 2
    fallback_models: str = ""

    # Daily token quotas
    free_daily_tokens: int = 2_500_000
    premium_daily_tokens: int = 250_000
    request_token_estimate: int = 1000

    def validate_api_keys(self) -> dict[str, bool]:
        """Check which API keys are configured."""
        return {
            "openai": bool(self.openai_api_key),
        }

    def fallback_model_chain(self) -> list[str]:
        """Parse the comma-separated fallback models."""
        return [m.strip() for m in self.fallback_models.split(",") if m.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
