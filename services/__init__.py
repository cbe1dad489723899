"""
Services layer for Reportes de Salidas.

Infrastructure services that support the operations layer.
"""

from .excel_writer import ExcelReportWriter, normalize_archive
from .file_service import FileService

__all__ = [
    # Excel Writer
    "ExcelReportWriter",
    "normalize_archive",
    # File Service
    "FileService",
]
