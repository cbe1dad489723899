"""
Configuration package for Reportes de Salidas.

Exports:
- AppContext: Application context for dependency injection
- Settings: Application settings
- Constants: Application constants
"""

from .app_context import AppContext, create_app_context
from .settings import Settings, get_settings, reset_settings
from .constants import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_WINDOW_DAYS,
    DEFAULT_PREVIEW_LIMIT,
    ERROR_MESSAGES,
    SUCCESS_MESSAGES,
)

__all__ = [
    # App Context
    "AppContext",
    "create_app_context",
    # Settings
    "Settings",
    "get_settings",
    "reset_settings",
    # Constants
    "APP_NAME",
    "APP_VERSION",
    "DEFAULT_WINDOW_DAYS",
    "DEFAULT_PREVIEW_LIMIT",
    "ERROR_MESSAGES",
    "SUCCESS_MESSAGES",
]
