"""
Application settings for Reportes de Salidas.

Loads settings from environment variables or uses defaults.
Provides centralized configuration management.
"""

import os
from pathlib import Path
from typing import Optional
from dataclasses import dataclass, field

from .constants import (
    APP_VERSION,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PREVIEW_LIMIT,
    DEFAULT_WINDOW_DAYS,
    OUTPUT_DIR,
)


@dataclass
class Settings:
    """
    Application settings.

    Can be loaded from environment variables or initialized with defaults.
    """

    app_version: str = APP_VERSION

    # Source of material exit records (JSON export of the exits API)
    source_path: Optional[Path] = None

    # Where generated reports are written
    output_dir: Path = field(default_factory=lambda: Path.cwd() / OUTPUT_DIR)

    # Report defaults
    default_window_days: int = DEFAULT_WINDOW_DAYS
    preview_limit: int = DEFAULT_PREVIEW_LIMIT

    # Debug settings
    debug_mode: bool = False
    log_level: str = DEFAULT_LOG_LEVEL  # DEBUG, INFO, WARNING, ERROR

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load settings from environment variables.

        Environment variables:
        - SALIDAS_SOURCE_PATH: JSON file with material exit records
        - SALIDAS_OUTPUT_DIR: Directory for generated reports
        - SALIDAS_DEFAULT_WINDOW_DAYS: Size of the default date window
        - SALIDAS_PREVIEW_LIMIT: Number of exits shown in previews
        - SALIDAS_DEBUG: Enable debug mode (true/false)
        - SALIDAS_LOG_LEVEL: Logging level (DEBUG/INFO/WARNING/ERROR)

        Returns:
            Settings instance with values from environment or defaults
        """
        source_path = os.getenv("SALIDAS_SOURCE_PATH")
        debug_mode = os.getenv("SALIDAS_DEBUG", "false").lower() == "true"

        return cls(
            source_path=Path(source_path) if source_path else None,
            output_dir=Path(os.getenv("SALIDAS_OUTPUT_DIR", str(OUTPUT_DIR))),
            default_window_days=int(os.getenv("SALIDAS_DEFAULT_WINDOW_DAYS", DEFAULT_WINDOW_DAYS)),
            preview_limit=int(os.getenv("SALIDAS_PREVIEW_LIMIT", DEFAULT_PREVIEW_LIMIT)),
            debug_mode=debug_mode,
            log_level="DEBUG" if debug_mode else os.getenv("SALIDAS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )

    def to_dict(self) -> dict:
        """Convert settings to dictionary for serialization."""
        return {
            "app_version": self.app_version,
            "source_path": str(self.source_path) if self.source_path else None,
            "output_dir": str(self.output_dir),
            "default_window_days": self.default_window_days,
            "preview_limit": self.preview_limit,
            "debug_mode": self.debug_mode,
            "log_level": self.log_level,
        }


# Global settings instance (lazy-loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get global settings instance.

    Lazy-loaded on first call. Loads from environment variables.

    Returns:
        Settings instance

    Example:
        >>> from config.settings import get_settings
        >>> settings = get_settings()
        >>> print(settings.output_dir)
    """
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings():
    """
    Reset global settings instance.

    Useful for testing - forces reload from environment on next get_settings() call.
    """
    global _settings
    _settings = None
