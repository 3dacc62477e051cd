"""Configuration management for Filament Hub."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FILAMENT_",
        extra="ignore",
    )

    # Paths
    output_dir: Path = Field(default=Path("output"), description="Directory for exported profile files")

    # AI suggestions
    gemini_api_key: Optional[str] = Field(default=None, description="Gemini API key for settings suggestions")
    gemini_model: str = Field(default="gemini-2.5-flash", description="Gemini model used for suggestions")
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta/",
        description="Gemini REST API base URL",
    )
    request_timeout: float = Field(default=30.0, description="Suggestion request timeout in seconds")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")

    # Feature flags
    mock_mode: bool = Field(default=False, description="Use the offline suggestion client")

    @property
    def has_credential(self) -> bool:
        """Check whether a suggestion service key is configured."""
        return bool(self.gemini_api_key)


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def configure(settings: Optional[Settings]) -> None:
    """Override global settings (None resets to environment defaults)."""
    global _settings
    _settings = settings
