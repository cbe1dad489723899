"""
Operations layer for Reportes de Salidas.

Business logic operations - pure functions with dependency injection.
No I/O - returns values the caller delivers or displays.
"""

from .load_ops import (
    load_exits,
    sort_exits_by_created_at,
)

from .filter_ops import (
    filter_exits_by_date,
    default_date_window,
)

from .category_ops import (
    categorize_exits,
    get_category_summary,
)

from .table_ops import (
    build_export_row,
    build_export_rows,
    rows_to_dataframe,
    build_exit_preview,
)

from .report_ops import (
    produce_artifact,
    produce_all_artifacts,
    get_report_summary,
)

__all__ = [
    # Load Operations
    "load_exits",
    "sort_exits_by_created_at",
    # Filter Operations
    "filter_exits_by_date",
    "default_date_window",
    # Category Operations
    "categorize_exits",
    "get_category_summary",
    # Table Operations
    "build_export_row",
    "build_export_rows",
    "rows_to_dataframe",
    "build_exit_preview",
    # Report Operations
    "produce_artifact",
    "produce_all_artifacts",
    "get_report_summary",
]
