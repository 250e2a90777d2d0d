"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Runtime
    environment: Literal["development", "production", "test"] = "development"
    log_level: str = "INFO"

    # Email deliverability (Verimail)
    verimail_api_key: str | None = None
    verimail_url: str = "https://api.verimail.io/v3/verify"
    email_verification_mode: Literal["enforce", "advisory", "disabled"] = "enforce"

    # Name plausibility (OpenAI chat completions)
    openai_api_key: str | None = None
    openai_url: str = "https://api.openai.com/v1/chat/completions"
    openai_model: str = "gpt-4o-mini"
    name_validation_enabled: bool = False
    name_cache_ttl_seconds: int = 300  # 5 minutes

    verification_timeout_seconds: float = 5.0  # Applies to every outbound call

    # Registration form policies
    access_code_policy: Literal["format", "allowlist"] = "format"
    access_codes: list[str] = []  # Only used by the allowlist policy
    name_charset: Literal["strict", "international"] = "strict"
    allow_00_phone_prefix: bool = False

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
