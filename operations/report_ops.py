"""
Report Operations for Reportes de Salidas.

Produce spreadsheet artifacts from material exits:
filter -> categorize -> tabulate -> serialize -> name.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from config.constants import ERROR_MESSAGES
from domain.exceptions import SerializationError
from domain.models import (
    DateWindow,
    ExportResult,
    ExportStatus,
    MaterialExitRecord,
    ReportCategory,
)
from domain.rules import build_report_file_name, build_sheet_label
from services.excel_writer import ExcelReportWriter
from .category_ops import categorize_exits
from .filter_ops import filter_exits_by_date
from .table_ops import build_export_rows, rows_to_dataframe

logger = logging.getLogger(__name__)


def produce_artifact(
    records: List[MaterialExitRecord],
    window: DateWindow,
    category: Union[ReportCategory, str],
    excel_writer: Optional[ExcelReportWriter] = None,
) -> ExportResult:
    """
    Produce the spreadsheet report for one category.

    Stateless: identical inputs give byte-identical content and the same
    file name. Never raises for data conditions; the outcome is in the
    result status:
    - OK: content holds the workbook bytes
    - EMPTY: no exits for the category in the window, no content
    - FAILED: rows could not be serialized, message holds the reason

    Args:
        records: Full exit collection (not modified)
        window: Date window
        category: Report category ("all", "ERSA", "UNBW")
        excel_writer: Serializer to use (defaults to ExcelReportWriter())

    Returns:
        ExportResult

    Raises:
        ValidationError: If category is unknown

    Example:
        >>> result = produce_artifact(exits, DateWindow("2024-01-01", "2024-01-31"), "ERSA")
        >>> if result.ok:
        ...     file_service.save_report(result.content, result.file_name)
    """
    category = ReportCategory.from_value(category)
    excel_writer = excel_writer or ExcelReportWriter()

    file_name = build_report_file_name(category, window.date_from, window.date_to)
    sheet_label = build_sheet_label(category)

    filtered = filter_exits_by_date(records, window)
    selected = categorize_exits(filtered.records).for_category(category)

    result = ExportResult(
        status=ExportStatus.EMPTY,
        category=category,
        file_name=file_name,
        sheet_label=sheet_label,
        malformed_count=filtered.malformed_count,
    )

    if not selected:
        result.message = ERROR_MESSAGES["empty_selection"]
        logger.info(f"No exits to export for {category.value} in window")
        return result

    rows = build_export_rows(selected)
    result.row_count = len(rows)
    table = rows_to_dataframe(rows)

    try:
        result.content = excel_writer.write_bytes(table, sheet_label)
    except SerializationError as e:
        result.status = ExportStatus.FAILED
        result.message = ERROR_MESSAGES["serialization_failed"].format(error=e.message)
        logger.error(f"Report {file_name} failed: {e}")
        return result

    result.status = ExportStatus.OK
    logger.info(f"Produced {file_name}: {len(rows)} rows, {len(result.content)} bytes")
    return result


def produce_all_artifacts(
    records: List[MaterialExitRecord],
    window: DateWindow,
    excel_writer: Optional[ExcelReportWriter] = None,
) -> Dict[ReportCategory, ExportResult]:
    """
    Produce the report for every category.

    Each category is produced independently; one failing does not
    affect the others.

    Returns:
        Dict of ReportCategory -> ExportResult, in ALL, ERSA, UNBW order
    """
    excel_writer = excel_writer or ExcelReportWriter()
    return {
        category: produce_artifact(records, window, category, excel_writer=excel_writer)
        for category in ReportCategory
    }


# ==================== Summary Functions ====================


def get_report_summary(results: List[ExportResult]) -> Dict[str, Any]:
    """
    Get report generation summary statistics.

    Args:
        results: Export results

    Returns:
        Dict with counts of produced, empty and failed reports

    Example:
        >>> summary = get_report_summary(list(produce_all_artifacts(exits, window).values()))
        >>> print(f"Reportes: {summary['produced']}")
    """
    produced = [r for r in results if r.ok]

    return {
        "total": len(results),
        "produced": len(produced),
        "empty": sum(1 for r in results if r.is_empty),
        "failed": sum(1 for r in results if r.failed),
        "rows": sum(r.row_count for r in produced),
        "files": [r.file_name for r in produced],
    }
