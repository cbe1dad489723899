"""
Domain layer for Reportes de Salidas.

This module contains core business entities, rules, and validators.
No dependencies on storage, UI, or external frameworks.
"""

from .models import (
    MaterialType,
    ReportCategory,
    MaterialExitRecord,
    DateWindow,
    ExportColumn,
    ExportRow,
    FilterResult,
    CategorizedExits,
    CategorySummary,
    PreviewRow,
    ExitPreview,
    ExportStatus,
    ExportResult,
)

from .exceptions import (
    ReportesBaseException,
    ValidationError,
    RecordStoreError,
    ReportGenerationError,
    SerializationError,
    DeliveryError,
)

from .validators import (
    validate_date_string,
    validate_sheet_label,
    validate_file_path,
    sanitize_filename,
)

from .rules import (
    EXPORT_COLUMNS,
    OPTIONAL_EXPORT_FIELDS,
    parse_exit_date,
    parse_created_at,
    is_within_window,
    is_category_member,
    get_category_file_tag,
    get_category_display_name,
    build_report_file_name,
    build_sheet_label,
    export_value,
)

__all__ = [
    # Models
    "MaterialType",
    "ReportCategory",
    "MaterialExitRecord",
    "DateWindow",
    "ExportColumn",
    "ExportRow",
    "FilterResult",
    "CategorizedExits",
    "CategorySummary",
    "PreviewRow",
    "ExitPreview",
    "ExportStatus",
    "ExportResult",
    # Exceptions
    "ReportesBaseException",
    "ValidationError",
    "RecordStoreError",
    "ReportGenerationError",
    "SerializationError",
    "DeliveryError",
    # Validators
    "validate_date_string",
    "validate_sheet_label",
    "validate_file_path",
    "sanitize_filename",
    # Rules
    "EXPORT_COLUMNS",
    "OPTIONAL_EXPORT_FIELDS",
    "parse_exit_date",
    "parse_created_at",
    "is_within_window",
    "is_category_member",
    "get_category_file_tag",
    "get_category_display_name",
    "build_report_file_name",
    "build_sheet_label",
    "export_value",
]
