"""Configuration management for regionhist using pydantic-settings.

Settings are read from environment variables with the ``REGIONHIST_``
prefix and an optional ``.env`` file.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HistogramSettings(BaseSettings):
    """Main configuration settings for regionhist.

    Examples:
        REGIONHIST_ZERO_WIDTH_TOLERANCE=1e-9
        REGIONHIST_STRICT_INTERSECTION=true
        REGIONHIST_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="REGIONHIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Binning settings
    zero_width_tolerance: float = Field(
        1e-6, ge=0.0, description="Bin widths below this are treated as a degenerate range"
    )

    # Comparison settings
    strict_intersection: bool = Field(
        False, description="Raise on mismatched histogram lengths instead of returning 0"
    )

    # Logging settings
    debug_mode: bool = Field(False, description="Enable debug logging")
    log_level: str = Field("INFO", description="Log level when debug mode is off")
    structured_logging: bool = Field(False, description="Render logs as JSON")
    log_file: Path | None = Field(None, description="Optional log file path")

    def effective_log_level(self) -> str:
        """Log level after applying debug mode."""
        return "DEBUG" if self.debug_mode else self.log_level.upper()


# Singleton instance
_settings: HistogramSettings | None = None


def get_settings() -> HistogramSettings:
    """Get the singleton settings instance.

    Returns:
        HistogramSettings instance
    """
    global _settings

    if _settings is None:
        _settings = HistogramSettings()

    return _settings


def configure(**overrides) -> HistogramSettings:
    """Replace the singleton with settings built from explicit overrides.

    Args:
        **overrides: Field values passed to HistogramSettings

    Returns:
        The new settings instance
    """
    global _settings
    _settings = HistogramSettings(**overrides)
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (mainly for testing)."""
    global _settings
    _settings = None
