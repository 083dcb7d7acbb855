"""
Configuration management using Pydantic Settings.

Loads environment variables with validation, defaults, and type safety.
"""

from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from db_pager.constants import DEFAULT_PAGE_SIZE, MIN_PAGE_SIZE, FetchMode

# Load .env from the project root (parent of src/) if present
_project_root = Path(__file__).parent.parent.parent
_env_file = _project_root / ".env"

load_dotenv(dotenv_path=_env_file, override=False)


class Settings(BaseSettings):
    """
    Package configuration loaded from environment variables.

    All settings have sensible defaults and are validated on load.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================================================
    # Paging Configuration
    # ========================================================================

    default_page_size: int = Field(
        default=DEFAULT_PAGE_SIZE,
        ge=MIN_PAGE_SIZE,
        description="Rows per page when a pager is created without a limit",
    )
    default_fetch_mode: FetchMode = Field(
        default=FetchMode.ORDERED,
        description="Row shape used when no fetch mode is given",
    )

    # ========================================================================
    # Logging Configuration
    # ========================================================================

    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: str = Field(
        default="json",
        description="Log format: json or text",
    )

    # ========================================================================
    # Validators
    # ========================================================================

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of {valid_levels}"
            )
        return v_upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format."""
        valid_formats = {"json", "text"}
        v_lower = v.lower()
        if v_lower not in valid_formats:
            raise ValueError(
                f"Invalid log format: {v}. Must be 'json' or 'text'"
            )
        return v_lower


# Global settings instance
# Loaded once at import time
settings = Settings()
