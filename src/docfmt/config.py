"""Configuration management for docfmt."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from docfmt.formatting.ir import DEFAULT_LINE_BREAK, TypeQualification


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Text of each line-break run (a paragraph break is two of them)
    line_break: str = Field(
        default=DEFAULT_LINE_BREAK,
        alias="DOCFMT_LINE_BREAK",
    )

    # Default display format for resolved symbols
    qualification: TypeQualification = Field(
        default=TypeQualification.NAME_AND_CONTAINING_TYPES,
        alias="DOCFMT_QUALIFICATION",
    )

    # Symbol table used by the CLI when --symbols is not given
    symbols_path: Optional[Path] = Field(
        default=None,
        alias="DOCFMT_SYMBOLS",
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
