"""
Business rules for Reportes de Salidas.

These functions encode the report layout and the date/category rules.
They are pure functions with no side effects.
"""

import re
from datetime import date, datetime, timezone
from typing import Any, List, Optional, Union

from .models import ExportColumn, MaterialExitRecord, ReportCategory
from .validators import DATE_PATTERN


# Spreadsheet layout: label, source field, display width (characters)
EXPORT_COLUMNS: List[ExportColumn] = [
    ExportColumn("Fecha", "exit_date", 12),
    ExportColumn("Hora", "exit_time", 10),
    ExportColumn("Tipo Material", "material_type", 12),
    ExportColumn("Código Material", "material_code", 15),
    ExportColumn("Nombre Material", "material_name", 30),
    ExportColumn("Ubicación", "material_location", 15),
    ExportColumn("Cantidad", "quantity", 10),
    ExportColumn("Stock Restante", "remaining_stock", 12),
    ExportColumn("Nombre Persona", "person_name", 15),
    ExportColumn("Apellido Persona", "person_last_name", 15),
    ExportColumn("Área Destino", "area", 20),
    ExportColumn("CECO", "ceco", 10),
    ExportColumn("Código SAP", "sap_code", 15),
    ExportColumn("Orden de Trabajo", "work_order", 15),
]

# Fields that may be absent upstream; exported as ""
OPTIONAL_EXPORT_FIELDS = ("ceco", "sap_code", "work_order")

REPORT_FILE_PREFIX = "salidas_materiales"
REPORT_EXTENSION = ".xlsx"
SHEET_LABEL_PREFIX = "Salidas"
ALL_FILE_TAG = "todas"
ALL_DISPLAY_NAME = "Todas"

# "YYYY-MM-DD" followed by a time part
TIMESTAMP_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}[T ]")


def parse_exit_date(value: Any) -> Optional[date]:
    """
    Parse an exit date into a calendar date.

    Accepts date/datetime objects, "YYYY-MM-DD" strings and full ISO
    timestamps (the time part is dropped). Other ISO 8601 spellings
    ("20240105", "2024-W01-1") are rejected on every Python version.

    Args:
        value: Raw exitDate from upstream

    Returns:
        Calendar date, or None if value cannot be parsed
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    cleaned = value.strip()
    if not cleaned:
        return None

    if DATE_PATTERN.match(cleaned):
        try:
            return date.fromisoformat(cleaned)
        except ValueError:
            return None

    parsed = _parse_timestamp(cleaned)
    return parsed.date() if parsed else None


def _parse_timestamp(value: str) -> Optional[datetime]:
    """Parse "YYYY-MM-DD[T ]..." timestamps, None otherwise."""
    if not TIMESTAMP_PREFIX.match(value):
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def parse_created_at(value: Any) -> Optional[datetime]:
    """
    Parse a record-creation timestamp.

    Aware timestamps are converted to naive UTC so all values compare.

    Returns:
        datetime, or None if value cannot be parsed
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        cleaned = value.strip()
        if DATE_PATTERN.match(cleaned):
            day = parse_exit_date(cleaned)
            parsed = datetime(day.year, day.month, day.day) if day else None
        else:
            parsed = _parse_timestamp(cleaned)
    else:
        return None

    if parsed is None:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def is_within_window(
    exit_date: date,
    start: Optional[date],
    end: Optional[date],
) -> bool:
    """
    Check if an exit date falls inside an inclusive window.

    Missing bounds leave that side open. An inverted window (start > end)
    contains no date.
    """
    if start and exit_date < start:
        return False
    if end and exit_date > end:
        return False
    return True


def is_category_member(record: MaterialExitRecord, category: ReportCategory) -> bool:
    """Check if a record belongs to a report category."""
    if category == ReportCategory.ALL:
        return True
    return record.material_kind.value == category.value


def get_category_file_tag(category: Union[ReportCategory, str]) -> str:
    """File name tag: "todas" for all exits, lowercase code otherwise."""
    category = ReportCategory.from_value(category)
    if category == ReportCategory.ALL:
        return ALL_FILE_TAG
    return category.value.lower()


def get_category_display_name(category: Union[ReportCategory, str]) -> str:
    """Display name: "Todas" for all exits, the code otherwise."""
    category = ReportCategory.from_value(category)
    if category == ReportCategory.ALL:
        return ALL_DISPLAY_NAME
    return category.value


def build_report_file_name(
    category: Union[ReportCategory, str],
    date_from: str = "",
    date_to: str = "",
) -> str:
    """
    Build the report file name for a category and date window.

    Deterministic: the same inputs always give the same name.

    Args:
        category: Report category
        date_from: Literal lower bound ("" if unbounded)
        date_to: Literal upper bound ("" if unbounded)

    Returns:
        e.g. "salidas_materiales_ersa_2024-01-01_2024-01-31.xlsx"
    """
    tag = get_category_file_tag(category)
    return f"{REPORT_FILE_PREFIX}_{tag}_{date_from or ''}_{date_to or ''}{REPORT_EXTENSION}"


def build_sheet_label(category: Union[ReportCategory, str]) -> str:
    """Worksheet name, e.g. "Salidas Todas" or "Salidas ERSA"."""
    return f"{SHEET_LABEL_PREFIX} {get_category_display_name(category)}"


def export_value(value: Any, optional: bool = False) -> Any:
    """Cell value for a record field; absent optional fields become ""."""
    if optional and (value is None or value == ""):
        return ""
    return value
