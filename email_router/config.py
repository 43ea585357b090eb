"""
Centralized configuration using Pydantic Settings.

All environment variables are loaded and validated here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Gemini
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-pro"

    # Routing targets, used for prompting, schema enums and autocomplete
    recipients: list[str] = [
        "support@example.com",
        "sales@example.com",
        "marketing@example.com",
        "billing@example.com",
        "info@example.com",
    ]

    # History persistence (JSON file)
    history_path: str = ".state/history.json"

    # Logging
    log_level: str = "INFO"
    json_logs: bool = True  # False for colored dev output


# Global settings instance
settings = Settings()
