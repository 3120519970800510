"""Configuration management using Pydantic Settings.

All library settings are defined in the Settings class and loaded from
environment variables (via .env file or system environment). Values passed
explicitly to RankingMetrics always take precedence over these defaults.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Library settings loaded from environment variables.

    Configuration is loaded from .env file and/or system environment variables.
    Every field has a default, so an empty environment is valid.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==================== Aggregation ====================
    num_workers: int = 0  # 0 scores queries sequentially
    show_progress: bool = False

    # ==================== Reporting ====================
    k_values: list[int] = [5, 10, 20]

    # ==================== Logging ====================
    log_level: str = "INFO"

    @field_validator("num_workers")
    @classmethod
    def validate_num_workers(cls, v: int) -> int:
        """Ensure the worker count is not negative."""
        if v < 0:
            raise ValueError(f"NUM_WORKERS must be >= 0, got {v}")
        return v

    @field_validator("k_values")
    @classmethod
    def validate_k_values(cls, v: list[int]) -> list[int]:
        """Ensure every reporting cutoff is a positive ranking position."""
        if not v:
            raise ValueError("K_VALUES must contain at least one ranking position")
        bad = [k for k in v if k <= 0]
        if bad:
            raise ValueError(f"K_VALUES must all be positive, got {bad}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the log level name and reject unknown levels."""
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {v!r}")
        return level


def get_settings() -> Settings:
    """Load and return the library settings.

    Returns:
        Settings instance populated from environment variables.

    Raises:
        ValidationError: If a setting is invalid.
    """
    return Settings()
