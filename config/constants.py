"""
Application constants for Reportes de Salidas.

Centralized location for all application-wide constants.
"""

from pathlib import Path

# ==================== Application Info ====================

APP_NAME = "Reportes de Salidas de Materiales"
APP_VERSION = "1.0.0"

# ==================== File Extensions ====================

SOURCE_EXTENSIONS = [".json"]

# ==================== Default Values ====================

DEFAULT_WINDOW_DAYS = 30  # Date window offered when the report screen opens
DEFAULT_PREVIEW_LIMIT = 10  # Exits shown in the preview table
DEFAULT_LOG_LEVEL = "INFO"

# ==================== Paths ====================

# Relative to working directory
OUTPUT_DIR = Path("reportes")

# ==================== Error Messages ====================

ERROR_MESSAGES = {
    "no_data": "No hay datos disponibles",
    "empty_selection": "No hay datos para exportar con los filtros seleccionados",
    "serialization_failed": "No se pudo generar el archivo Excel: {error}",
    "source_not_found": "No se encontró el archivo de salidas: {path}",
    "invalid_source": "Archivo de salidas inválido: {path}",
}

# ==================== Success Messages ====================

SUCCESS_MESSAGES = {
    "report_generated": "Reporte generado: {path} ({rows} filas)",
    "summary": "Total Salidas: {total} | Salidas ERSA: {ersa} | Salidas UNBW: {unbw}",
}
