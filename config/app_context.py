"""
Application Context for Reportes de Salidas.

Centralized application state and dependency injection.
"""

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Optional

from data.interface import RecordStoreInterface
from domain.models import DateWindow
from services.file_service import FileService
from .settings import Settings, get_settings


@dataclass
class AppContext:
    """
    Centralized application context.

    Contains the record store, settings and the current date window.
    Passed to operations by the command line entry point.

    Key principles:
    - Immutable where possible (use with_* methods for changes)
    - All dependencies explicit (record store, settings, etc.)
    - No global state - everything through context

    Example:
        >>> from data import create_record_store
        >>> store = create_record_store("json", path="./salidas.json")
        >>> ctx = create_app_context(record_store=store)
        >>> ctx = ctx.with_window(DateWindow("2024-01-01", "2024-01-31"))
        >>> result = produce_artifact(load_exits(ctx.record_store), ctx.window, "ERSA")
    """

    # Core dependencies (required)
    record_store: RecordStoreInterface
    settings: Settings = field(default_factory=get_settings)

    # Date window selected by the operator (unbounded until set)
    window: DateWindow = field(default_factory=DateWindow)

    @property
    def output_dir(self) -> Path:
        """Get report output directory from settings."""
        return self.settings.output_dir

    @property
    def file_service(self) -> FileService:
        """File service writing into the output directory."""
        return FileService(self.output_dir)

    def with_window(self, window: DateWindow) -> "AppContext":
        """
        Create new context with a different date window.

        Immutable pattern - returns new instance instead of modifying self.
        """
        return AppContext(
            record_store=self.record_store,
            settings=self.settings,
            window=window,
        )

    def with_default_window(self, today: Optional[date] = None) -> "AppContext":
        """Create new context with the default window ending today."""
        from operations.filter_ops import default_date_window

        return self.with_window(
            default_date_window(today=today, days=self.settings.default_window_days)
        )


def create_app_context(
    record_store: RecordStoreInterface,
    settings: Optional[Settings] = None,
    window: Optional[DateWindow] = None,
) -> AppContext:
    """
    Factory function to create AppContext.

    Args:
        record_store: Record store instance (required)
        settings: Settings instance (defaults to global settings)
        window: Initial date window (defaults to unbounded)

    Returns:
        AppContext instance
    """
    if settings is None:
        settings = get_settings()

    return AppContext(
        record_store=record_store,
        settings=settings,
        window=window or DateWindow(),
    )
