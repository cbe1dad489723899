"""
Table Operations for Reportes de Salidas.

Map material exits onto the report columns and build previews.
Pure functions - no I/O, no side effects.
"""

import logging
from typing import List, Optional, Sequence

import pandas as pd

from config.constants import DEFAULT_PREVIEW_LIMIT
from domain.models import (
    ExitPreview,
    ExportColumn,
    ExportRow,
    MaterialExitRecord,
    PreviewRow,
)
from domain.rules import EXPORT_COLUMNS, export_value

logger = logging.getLogger(__name__)


def build_export_row(record: MaterialExitRecord) -> ExportRow:
    """
    Project one exit onto the 14 report columns.

    Required fields are copied verbatim; absent ceco, sap_code and
    work_order become "".
    """
    return ExportRow(
        exit_date=record.exit_date,
        exit_time=record.exit_time,
        material_type=record.material_type,
        material_code=record.material_code,
        material_name=record.material_name,
        material_location=record.material_location,
        quantity=record.quantity,
        remaining_stock=record.remaining_stock,
        person_name=record.person_name,
        person_last_name=record.person_last_name,
        area=record.area,
        ceco=export_value(record.ceco, optional=True),
        sap_code=export_value(record.sap_code, optional=True),
        work_order=export_value(record.work_order, optional=True),
    )


def build_export_rows(records: List[MaterialExitRecord]) -> List[ExportRow]:
    """
    Project exits onto report rows.

    The n-th row belongs to the n-th record; no re-sorting.
    An empty input gives an empty list.

    Args:
        records: Categorized exits

    Returns:
        List of ExportRow in input order
    """
    rows = [build_export_row(record) for record in records]
    logger.debug(f"Built {len(rows)} export rows")
    return rows


def rows_to_dataframe(
    rows: Sequence[ExportRow],
    columns: Optional[Sequence[ExportColumn]] = None,
) -> pd.DataFrame:
    """
    Tabulate export rows with the column labels as headers.

    Args:
        rows: Export rows
        columns: Column layout (defaults to the report columns)

    Returns:
        DataFrame with one column per layout column, rows in input order
    """
    columns = list(columns or EXPORT_COLUMNS)
    data = [[getattr(row, column.field) for column in columns] for row in rows]
    return pd.DataFrame(data, columns=[column.label for column in columns])


def build_exit_preview(
    records: List[MaterialExitRecord],
    limit: int = DEFAULT_PREVIEW_LIMIT,
) -> ExitPreview:
    """
    Condensed view of the first exits of a filtered set.

    Args:
        records: Filtered exits (newest first when loaded with load_exits)
        limit: Maximum number of rows shown

    Returns:
        ExitPreview with at most `limit` rows and the count left out
    """
    limit = max(limit, 0)
    shown = records[:limit]

    rows = [
        PreviewRow(
            fecha=f"{record.exit_date} {record.exit_time}".strip(),
            tipo=str(record.material_type),
            material=str(record.material_name),
            cantidad=record.quantity,
            persona=f"{record.person_name} {record.person_last_name}".strip(),
            area=str(record.area),
        )
        for record in shown
    ]

    return ExitPreview(rows=rows, remaining=len(records) - len(shown))
