"""
Excel Writer Service.

Serializes a report table into a single-sheet .xlsx workbook:
- Header row with the column labels
- One data row per table row, in order
- Fixed column display widths

Uses pandas and openpyxl for Excel processing.
"""

import logging
import re
import zipfile
from io import BytesIO
from typing import Dict, List, Optional, Sequence

import pandas as pd
from openpyxl.utils import get_column_letter

from domain.exceptions import SerializationError
from domain.models import ExportColumn
from domain.rules import EXPORT_COLUMNS
from domain.validators import validate_sheet_label

logger = logging.getLogger(__name__)


# openpyxl stamps the save time into the archive; these replace it so that
# identical rows always serialize to identical bytes.
ARCHIVE_DATE_TIME = (1980, 1, 1, 0, 0, 0)
DOCUMENT_TIMESTAMP = b"2000-01-01T00:00:00Z"
CORE_PROPERTIES_PART = "docProps/core.xml"
_TIMESTAMP_ELEMENT = re.compile(
    rb"(<(?:\w+:)?(?:created|modified)\b[^>]*>)[^<]*(</(?:\w+:)?(?:created|modified)>)"
)


class ExcelReportWriter:
    """
    Spreadsheet serializer for material exit reports.

    Example:
        >>> writer = ExcelReportWriter()
        >>> content = writer.write_bytes(rows_to_dataframe(rows), "Salidas ERSA")
    """

    def __init__(self, columns: Optional[Sequence[ExportColumn]] = None):
        """
        Initialize Excel writer.

        Args:
            columns: Column layout giving display widths (defaults to the 14 report columns)
        """
        self.columns: List[ExportColumn] = list(columns or EXPORT_COLUMNS)

    @property
    def widths(self) -> Dict[str, int]:
        """Display width per header label."""
        return {column.label: column.width for column in self.columns}

    def write_bytes(self, df: pd.DataFrame, sheet_label: str) -> bytes:
        """
        Serialize a report table into an .xlsx workbook.

        Args:
            df: Table with header labels as columns (may have no rows: header only)
            sheet_label: Worksheet name

        Returns:
            Workbook bytes

        Raises:
            ValidationError: If sheet_label is not a valid worksheet name
            SerializationError: If a value cannot be encoded
        """
        sheet_label = validate_sheet_label(sheet_label)
        buffer = BytesIO()

        try:
            with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
                df.to_excel(writer, sheet_name=sheet_label, index=False)
                self._apply_column_widths(writer.sheets[sheet_label], df.columns)
            content = normalize_archive(buffer.getvalue())
        except Exception as e:
            logger.error(f"Failed to serialize {len(df)} rows into '{sheet_label}': {e}")
            raise SerializationError(
                f"No se pudo generar el archivo Excel: {e}",
                details={"sheet_label": sheet_label, "rows": len(df), "error": str(e)},
            )

        logger.debug(f"Serialized {len(df)} rows into '{sheet_label}' ({len(content)} bytes)")
        return content

    def _apply_column_widths(self, worksheet, labels: Sequence[str]) -> None:
        """Set fixed display width (in characters) on every known column."""
        widths = self.widths
        for idx, label in enumerate(labels, start=1):
            if label in widths:
                worksheet.column_dimensions[get_column_letter(idx)].width = widths[label]


def normalize_archive(content: bytes) -> bytes:
    """
    Rewrite an .xlsx archive without save-time timestamps.

    Zip entry dates and the document created/modified properties are set
    to fixed values; entry order and content are otherwise unchanged.

    Args:
        content: Workbook bytes as written by openpyxl

    Returns:
        Normalized workbook bytes
    """
    output = BytesIO()

    with zipfile.ZipFile(BytesIO(content)) as source, \
            zipfile.ZipFile(output, "w", zipfile.ZIP_DEFLATED) as target:
        for info in source.infolist():
            data = source.read(info.filename)
            if info.filename == CORE_PROPERTIES_PART:
                data = _TIMESTAMP_ELEMENT.sub(rb"\g<1>" + DOCUMENT_TIMESTAMP + rb"\g<2>", data)

            entry = zipfile.ZipInfo(info.filename, date_time=ARCHIVE_DATE_TIME)
            entry.compress_type = zipfile.ZIP_DEFLATED
            entry.external_attr = info.external_attr
            target.writestr(entry, data)

    return output.getvalue()
