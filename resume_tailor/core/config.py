"""Configuration settings for ResumeTailor AI.

This module provides a Settings class that loads configuration from environment variables
with support for .env files. It uses pydantic for validation and type conversion.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_PROMPTS_DIRECTORY = Path(__file__).resolve().parent.parent / "prompts"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Required settings:
        OPENAI_API_KEY: API key for OpenAI

    Optional settings with defaults:
        LOG_LEVEL: Logging level (default: "INFO")
        DEFAULT_MODEL_NAME: OpenAI model to use (default: "gpt-4.1")
        OPENAI_TEMPERATURE: Sampling temperature (default: 0.7)
        PROMPTS_DIRECTORY: Directory holding the prompt templates (default: packaged prompts)
        ALLOWED_UPLOAD_EXTENSIONS: File extensions accepted by the resume uploader (default: ["txt"])
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Required settings
    OPENAI_API_KEY: str = Field(..., description="API key for OpenAI")

    # Optional settings with defaults
    LOG_LEVEL: str = "INFO"
    DEFAULT_MODEL_NAME: str = "gpt-4.1"

    # OpenAI API settings
    OPENAI_TEMPERATURE: float = 0.7

    # Prompt templates
    PROMPTS_DIRECTORY: Path = PACKAGE_PROMPTS_DIRECTORY
    TAILOR_RESUME_PROMPT_FILENAME: str = "tailor_resume_prompt.txt"

    # Input acquisition
    ALLOWED_UPLOAD_EXTENSIONS: list[str] = ["txt"]

    @field_validator("OPENAI_API_KEY")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate the API key is non-empty and has a reasonable length."""
        min_length = 10
        if not v or len(v.strip()) < min_length:
            raise ValueError(f"API key must be at least {min_length} characters long")
        return v.strip()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(sorted(valid_levels))}")
        return v.upper()

    @field_validator("OPENAI_TEMPERATURE")
    @classmethod
    def validate_temperature(cls, v: float) -> float:
        """Validate temperature is between 0 and 2."""
        if not 0 <= v <= 2:
            raise ValueError("Temperature must be between 0 and 2")
        return v

    @field_validator("ALLOWED_UPLOAD_EXTENSIONS")
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        """Strip leading dots and lowercase the upload extensions."""
        extensions = [ext.strip().lstrip(".").lower() for ext in v if ext.strip()]
        if not extensions:
            raise ValueError("At least one upload extension must be allowed")
        return extensions

    @property
    def tailor_resume_prompt_path(self) -> Path:
        return self.PROMPTS_DIRECTORY / self.TAILOR_RESUME_PROMPT_FILENAME


# Global settings instance - using a function to ensure it's only created once
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance.

    This ensures we only load settings once and cache them.
    """
    global _settings
    if _settings is None:
        _settings = Settings()  # type: ignore[call-arg]
    return _settings
